from lunycodegen.cli import main

main()
