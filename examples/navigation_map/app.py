"""Navigation map — a small app wired together by URLs.

Demonstrates schemeless mapping with a default scheme, untyped and path
placeholders, an open handler that reads query parameters, and a
presenter that records what would be shown on screen.

Run:
    python app.py
"""

from dataclasses import dataclass

from deepnav import Navigator, NavigatorConfig, RecordingPresenter
from deepnav.url import as_url

presenter = RecordingPresenter()
navigator = Navigator(NavigatorConfig(scheme="navigator"), presenter=presenter)


class UserView:
    """Profile screen for ``navigator://user/<username>``."""

    def __init__(self, url, values) -> None:
        self.username = values["username"]

    def __repr__(self) -> str:
        return f"UserView({self.username!r})"


class WebView:
    """In-app browser for any http(s) link."""

    def __init__(self, url, values) -> None:
        self.url = as_url(url).string

    def __repr__(self) -> str:
        return f"WebView({self.url!r})"


@dataclass(frozen=True, slots=True)
class Alert:
    title: str | None
    message: str | None


navigator.map("/user/<username>", UserView)
navigator.map("http://<path:_>", WebView)
navigator.map("https://<path:_>", WebView)


@navigator.route("/alert")
def alert(url, values) -> bool:
    query = as_url(url).query_params
    navigator.present(Alert(title=query.get("title"), message=query.get("message")))
    return True


if __name__ == "__main__":
    navigator.push_url("navigator://user/devxoul")
    navigator.push_url("https://github.com/devxoul")
    navigator.open_url("navigator://alert?title=Hello&message=World")
    for transition in presenter.stack:
        print(transition.action, transition.target)
