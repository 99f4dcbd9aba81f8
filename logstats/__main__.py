from .runner import app

app(prog_name="logstats")
