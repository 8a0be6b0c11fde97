from servicetag_lookup.cli import main

main()
