from bigtext_cli.services.renderer import render

# The banner is drawn with the default glyph table
banner_ascii = str(render("BIGTEXT"))
