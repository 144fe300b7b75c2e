from gitstat.cli.app import main

main()
