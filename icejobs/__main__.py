from icejobs.commands import run

run()
