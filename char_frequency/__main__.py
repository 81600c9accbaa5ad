from char_frequency.cli import run

run()
