from rankconf.cli import main

main()
