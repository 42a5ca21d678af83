from greedytsp.solver import run

run()
