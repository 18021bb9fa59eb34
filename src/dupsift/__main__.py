from dupsift.cli import main

main()
