"""Monte Carlo Tree Search move engine for tic-tac-toe."""
