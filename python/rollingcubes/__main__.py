from rollingcubes.main import app

app(prog_name="rolling-cubes")
