from parish_data.cli.app import app

app()
