from wallpaper_selector.main import cli

cli()
