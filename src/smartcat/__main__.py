from smartcat.cli import main

main()
