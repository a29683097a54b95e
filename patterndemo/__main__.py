from patterndemo.cli.main import main

main()
