"""Hello: the simplest lizard app.

Demonstrates per-method routes, path parameters, first-registered-wins
precedence, middleware and the response builder.

Run:
    python app.py
"""

from lizard import App

app = App()


async def timing_header(event, next):
    response = await next()
    return response.with_header("X-Served-By", "lizard")


app.use(timing_header)
app.config({"SITE_NAME": "Home Page"})


@app.get("/")
def index(event):
    return event.response.text(event.config["SITE_NAME"])


@app.get("/home")
def home(event):
    return event.response.text("Home Page")


@app.get("/home/:id")
def home_user(event):
    return event.response.text(f"User {event.params['id']}")


@app.get("/home/:id/profile")
def home_profile(event):
    return event.response.text(f"User {event.params['id']} Profile")


@app.post("/user")
def create_user(event):
    name = (event.body or {}).get("name", "anonymous")
    return event.response.status(201).json({"created": name})


@app.put("/user/:id")
def update_user(event):
    return event.response.text(f"User {event.params['id']} Updated")


@app.delete("/user/:id")
def delete_user(event):
    return event.response.text(f"User {event.params['id']} Deleted")


if __name__ == "__main__":
    app.listen(3000, lambda: print("Listening on http://127.0.0.1:3000"))
