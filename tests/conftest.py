"""Shared fixtures: a games link handler reporting to a recording coordinator."""

from dataclasses import dataclass, field
from enum import Enum

import pytest

from linkrouter.config import RouterConfig
from linkrouter.routing.handler import BaseLinkHandler
from linkrouter.routing.link import Link
from linkrouter.routing.router import LinkRouter


class Verdict(Enum):
    GAMES = "games"
    USERS_GAMES = "users_games"
    USERS_REVIEWS = "users_reviews"
    GAME_REVIEWS = "game_reviews"


@dataclass
class RecordingCoordinator:
    """Remembers the last screen a handler asked for."""

    verdict: Verdict | None = None
    dynamic_element: str | None = None

    def show_games_home(self) -> None:
        self.verdict = Verdict.GAMES

    def show_game_collection(self, username: str) -> None:
        self.verdict = Verdict.USERS_GAMES
        self.dynamic_element = username

    def show_game_reviews(self, username: str) -> None:
        self.verdict = Verdict.USERS_REVIEWS
        self.dynamic_element = username

    def show_game_review(self, game: str) -> None:
        self.verdict = Verdict.GAME_REVIEWS
        self.dynamic_element = game


@dataclass
class GamesLinkHandler(BaseLinkHandler):
    coordinator: RecordingCoordinator
    path_schemes: tuple[str, ...] = (
        "games",
        "games/{username}",
        "games/{username}/reviews",
        "games/reviews/{game}",
    )

    def handle(self, link: Link) -> bool:
        result = self.result_for(link)
        if result is None:
            self.coordinator.show_games_home()
            return True

        game = result.params.get("game")
        username = result.params.get("username")
        if game is not None and "reviews" in link.path_components:
            self.coordinator.show_game_review(game)
        elif username is not None:
            if "reviews" in result.trailing_components:
                self.coordinator.show_game_reviews(username)
            else:
                self.coordinator.show_game_collection(username)
        else:
            self.coordinator.show_games_home()
        return True


@dataclass
class RecordingHandler(BaseLinkHandler):
    """Claims links by root segment and records every link it is given."""

    path_schemes: tuple[str, ...] = ()
    result: bool = True
    seen: list[Link] = field(default_factory=list)

    def handle(self, link: Link) -> bool:
        self.seen.append(link)
        return self.result


@pytest.fixture
def coordinator() -> RecordingCoordinator:
    return RecordingCoordinator()


@pytest.fixture
def games_handler(coordinator: RecordingCoordinator) -> GamesLinkHandler:
    return GamesLinkHandler(coordinator)


@pytest.fixture
def router(games_handler: GamesLinkHandler) -> LinkRouter:
    r = LinkRouter(RouterConfig(app_scheme="test-app", web_host="www.test-app.com"))
    r.add_handler(games_handler)
    return r
