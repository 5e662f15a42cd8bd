"""Hello World — the simplest signpost app.

Demonstrates exact routes, path parameters, view auto-mapping and a
custom 404 handler.

Run:
    python app.py
"""

from pathlib import Path
from wsgiref.simple_server import make_server

from signpost import App, AppConfig, AutoMap

VIEWS = Path(__file__).parent / "views"

app = App(AppConfig(view_dir=VIEWS, auto_map=AutoMap.ENABLED, log_level="debug"))


@app.route("/")
def index():
    return "Hello, World!"


@app.route("/greet/:name")
def greet(name: str):
    return f"Hello, {name}!"


@app.route("/users/:id/posts/:post")
def user_post(user_id: str, post: str):
    return app.render("post.html", user_id=user_id, post=post)


@app.error_404
def not_found():
    return "Nothing here"


if __name__ == "__main__":
    make_server("127.0.0.1", 8000, app).serve_forever()
