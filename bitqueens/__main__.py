from bitqueens.analysis.cli import main

main()
