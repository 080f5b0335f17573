from jinja2 import Environment, PackageLoader, select_autoescape

env = Environment(
    loader=PackageLoader("cooklang_indexer", "templates"),
    autoescape=select_autoescape(["html", "xml"]),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)

ingredient_index_template = env.get_template("ingredient_index.html")
