"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='cooperad-dg',
	author='Beth Kjos',
	author_email='kjosib@gmail.com',
	version='0.0.1',
	packages=['cooperad', ],
	entry_points={
		'console_scripts': ["cooperad = cooperad.cmdline:main"],
	},
	license='MIT',
	description='Extend local differentials to coderivations on cooperads, and check the co-Leibniz law',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.12",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Science/Research",
		"Topic :: Scientific/Engineering :: Mathematics",
		"Environment :: Console",
    ],
	python_requires='>=3.12',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
