from cooperad.cmdline import main

main()
