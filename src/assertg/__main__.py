from assertg.cli import app

app(prog_name="assertg")
