from text_split.cli import app

app(prog_name="text-split")
