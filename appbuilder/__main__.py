from appbuilder.interfaces.cli.main import main

main()
