"""One module per puzzle day, each with its part solvers and a command-line main."""