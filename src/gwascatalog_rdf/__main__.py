from gwascatalog_rdf.cli import main

main()
