from edgegraph._cli.main import main

main()
