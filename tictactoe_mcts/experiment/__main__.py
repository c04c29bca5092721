from tictactoe_mcts.experiment.runner import main

main()
