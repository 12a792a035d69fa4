from dataclasses import dataclass

from proplink import Container, Seed, redirect

##################
# Implementation #
##################


class Player:
    def __init__(self, name):
        self.name = name
        self.score = 0
        # difficulty is not defined here, it comes from the game
        self.lives = 5 - self.difficulty

    def win(self, points):
        self.score += points


class Scoreboard:
    def __init__(self):
        self.score = 0

    def render(self):
        return f"[{self.title}] score: {self.score}"


@dataclass
class Settings:
    volume: int = 0
    muted: bool = False


#################
# Demonstration #
#################


def main():
    game = Container(difficulty=2, title="Proplink Quest")

    # Both members link "score", so they share the game's score
    game.contain_class("player", Player, {"name": "Alice"}, link_props=["score"])
    game.contain_class("board", Scoreboard, link_props=["score"])

    print(f"Lives: {game.player.lives}")  # Should print: Lives: 3
    assert game.player.lives == 3

    game.player.win(10)
    print(game.board.render())  # Should print: [Proplink Quest] score: 10
    assert game.board.score == game.score == 10

    # Redirect fields of a standalone object to a plain dict
    store = {"volume": 0}
    settings = Settings(volume=7)
    redirect(store, settings, ["volume", "muted"], seed=Seed.FALSY)
    settings.muted = True
    print(f"Store: {store}")  # Should print: Store: {'volume': 7, 'muted': True}
    assert store == {"volume": 7, "muted": True}


if __name__ == "__main__":
    main()
