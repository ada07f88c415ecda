from state_up.cli import main

main()
