from dutree.cli import run

run()
