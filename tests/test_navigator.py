"""Tests for deepnav.navigator — mapping, matching, opening, and presenting."""

import pytest

from deepnav.config import NavigatorConfig
from deepnav.errors import ConfigurationError, SchemeRequiredError
from deepnav.navigator import Navigator, default_navigator
from deepnav.presenter import RecordingPresenter
from deepnav.routing.route import RouteKind
from deepnav.url import DeepURL


class UserView:
    def __init__(self, url, values) -> None:
        self.url = url
        self.values = values


class WebView:
    def __init__(self, url, values) -> None:
        self.url = url
        self.values = values


def _navigator(**kwargs) -> Navigator:
    return Navigator(NavigatorConfig(scheme="myapp", **kwargs))


class TestScheme:
    def test_default_none(self) -> None:
        assert Navigator().scheme is None

    def test_from_config(self) -> None:
        assert _navigator().scheme == "myapp"

    def test_separator_stripped(self) -> None:
        nav = Navigator()
        nav.scheme = "myapp://"
        assert nav.scheme == "myapp"

    def test_config_separator_stripped(self) -> None:
        assert Navigator(NavigatorConfig(scheme="myapp://")).scheme == "myapp"


class TestMapping:
    def test_class_maps_as_navigable(self) -> None:
        nav = _navigator()
        route = nav.map("/user/<int:id>", UserView)
        assert route.kind is RouteKind.NAVIGABLE
        assert route.pattern == "myapp://user/<int:id>"

    def test_function_maps_as_handler(self) -> None:
        nav = _navigator()
        route = nav.map("/say-hello", lambda url, values: True)
        assert route.kind is RouteKind.HANDLER

    def test_non_callable_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            _navigator().map("/user", "not callable")  # type: ignore[arg-type]

    def test_map_navigable_forces_kind(self) -> None:
        nav = _navigator()

        def make_user(url, values):
            return UserView(url, values)

        route = nav.map_navigable("/user/<id>", make_user)
        assert route.kind is RouteKind.NAVIGABLE
        assert isinstance(nav.navigable_for_url("myapp://user/1"), UserView)

    def test_decorator(self) -> None:
        nav = _navigator()

        @nav.route("/ping")
        def ping(url, values) -> bool:
            return True

        assert nav.open_url("myapp://ping") is True

    def test_patterns_normalized(self) -> None:
        nav = _navigator()
        nav.map("myapp:///user//<id>/", UserView)
        assert [r.pattern for r in nav.routes] == ["myapp://user/<id>"]

    def test_same_normalized_pattern_last_wins(self) -> None:
        nav = _navigator()
        nav.map("/user/<id>", UserView)
        nav.map("myapp://user/<id>/", WebView)
        assert len(nav.routes) == 1
        assert isinstance(nav.navigable_for_url("myapp://user/1"), WebView)

    def test_routes_lists_navigables_then_handlers(self) -> None:
        nav = _navigator()
        nav.map("/alert", lambda url, values: True)
        nav.map("/user/<id>", UserView)
        assert [r.kind for r in nav.routes] == [RouteKind.NAVIGABLE, RouteKind.HANDLER]

    def test_strict_schemeless_pattern_raises(self) -> None:
        nav = Navigator(NavigatorConfig(strict=True))
        with pytest.raises(SchemeRequiredError):
            nav.map("/user/<id>", UserView)


class TestMatch:
    def test_registration_order_decides(self) -> None:
        nav = _navigator()
        nav.map("/user/<name>", WebView)
        nav.map("/user/<int:id>", UserView)
        found = nav.match("myapp://user/7")
        assert found.route.target is WebView
        assert found.values == {"name": "7"}

    def test_kind_filter(self) -> None:
        nav = _navigator()
        nav.map("/thing", UserView)
        nav.map("/thing", lambda url, values: True)
        assert nav.match("/thing", RouteKind.NAVIGABLE).route.kind is RouteKind.NAVIGABLE
        assert nav.match("/thing", RouteKind.HANDLER).route.kind is RouteKind.HANDLER
        assert nav.match("/thing").route.kind is RouteKind.NAVIGABLE

    def test_kind_as_plain_string(self) -> None:
        nav = _navigator()
        nav.map("/user/<id>", UserView)
        nav.map("/alert", lambda url, values: True)
        assert nav.match("/user/1", "navigable").route.target is UserView
        assert nav.match("/user/1", "handler") is None
        assert nav.match("/alert", "navigable") is None
        assert nav.match("/alert", "handler").route.kind is RouteKind.HANDLER

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValueError):
            _navigator().match("/user/1", "screen")

    def test_falls_back_to_handlers(self) -> None:
        nav = _navigator()
        nav.map("/alert", lambda url, values: True)
        assert nav.match("/alert").route.kind is RouteKind.HANDLER

    def test_no_match(self) -> None:
        assert _navigator().match("myapp://nothing") is None

    def test_log_matches(self, caplog: pytest.LogCaptureFixture) -> None:
        nav = _navigator(log_matches=True)
        nav.map("/user/<id>", UserView)
        with caplog.at_level("INFO", logger="deepnav.navigator"):
            nav.match("/user/1")
        assert any("myapp://user/<id>" in r.getMessage() for r in caplog.records)


class TestNavigableForURL:
    def test_builds_with_url_and_values(self) -> None:
        nav = _navigator()
        nav.map("/user/<int:id>", UserView)
        view = nav.navigable_for_url("myapp://user/123")
        assert isinstance(view, UserView)
        assert view.url == "myapp://user/123"
        assert view.values == {"id": 123}

    def test_schemeless_url(self) -> None:
        nav = _navigator()
        nav.map("/user/<int:id>", UserView)
        assert nav.navigable_for_url("/user/5").values == {"id": 5}

    def test_path_placeholder(self) -> None:
        nav = _navigator()
        nav.map("http://<path:url>", WebView)
        view = nav.navigable_for_url("http://jhink.com/contact?x=1")
        assert view.values == {"url": "jhink.com/contact"}

    def test_handlers_not_considered(self) -> None:
        nav = _navigator()
        nav.map("/alert", lambda url, values: True)
        assert nav.navigable_for_url("myapp://alert") is None

    def test_original_url_passed_through(self) -> None:
        nav = _navigator()
        nav.map("/user/<id>", UserView)
        url = DeepURL("myapp://user/1?tab=posts")
        view = nav.navigable_for_url(url)
        assert view.url is url
        assert view.url.query_params["tab"] == "posts"


class TestOpenURL:
    def test_runs_handler(self) -> None:
        nav = _navigator()
        calls = []

        def hello(url, values) -> bool:
            calls.append((url, values))
            return True

        nav.map("/say-hello/<name>", hello)
        assert nav.open_url("myapp://say-hello/world") is True
        assert calls == [("myapp://say-hello/world", {"name": "world"})]

    def test_handler_returning_false(self) -> None:
        nav = _navigator()
        nav.map("/nope", lambda url, values: False)
        assert nav.open_url("myapp://nope") is False

    def test_truthy_non_bool_is_not_handled(self) -> None:
        nav = _navigator()
        nav.map("/maybe", lambda url, values: "yes")
        assert nav.open_url("myapp://maybe") is False

    def test_no_match(self) -> None:
        assert _navigator().open_url("myapp://missing") is False

    def test_navigables_not_considered(self) -> None:
        nav = _navigator()
        nav.map("/user/<id>", UserView)
        assert nav.open_url("myapp://user/1") is False


class TestPushAndPresent:
    def test_push_url(self) -> None:
        nav = _navigator()
        nav.map("/user/<id>", UserView)
        presenter = RecordingPresenter()
        view = nav.push_url("myapp://user/1", presenter=presenter, animated=False)
        assert isinstance(view, UserView)
        assert presenter.top is view
        assert presenter.stack[0].action == "push"
        assert presenter.stack[0].animated is False

    def test_present_url_wrapped(self) -> None:
        nav = _navigator()
        nav.map("/user/<id>", UserView)
        presenter = RecordingPresenter()
        done = []
        view = nav.present_url(
            "/user/1", presenter=presenter, wrap=True, completion=lambda: done.append(True)
        )
        assert presenter.stack[0].action == "present"
        assert presenter.stack[0].wrap is True
        assert presenter.top is view
        assert done == [True]

    def test_navigator_presenter_used_by_default(self) -> None:
        presenter = RecordingPresenter()
        nav = Navigator(NavigatorConfig(scheme="myapp"), presenter=presenter)
        nav.map("/user/<id>", UserView)
        assert nav.push_url("/user/1") is presenter.top

    def test_no_presenter(self) -> None:
        nav = _navigator()
        nav.map("/user/<id>", UserView)
        assert nav.push_url("/user/1") is None
        assert nav.present_url("/user/1") is None

    def test_refusing_presenter(self) -> None:
        nav = _navigator()
        nav.map("/user/<id>", UserView)
        presenter = RecordingPresenter(accepting=False)
        assert nav.push_url("/user/1", presenter=presenter) is None
        assert nav.present_url("/user/1", presenter=presenter) is None
        assert presenter.stack == []

    def test_no_match(self) -> None:
        presenter = RecordingPresenter()
        assert _navigator().push_url("/missing", presenter=presenter) is None
        assert presenter.stack == []


class TestDefaultNavigator:
    def test_same_instance(self) -> None:
        assert default_navigator() is default_navigator()

    def test_is_navigator(self) -> None:
        assert isinstance(default_navigator(), Navigator)
