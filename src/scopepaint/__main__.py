from scopepaint.cli import main

main()
