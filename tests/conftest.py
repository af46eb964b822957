"""Shared fixtures for the Skript analyzer tests."""

import pytest

from skript_analyzer.main_checker import SkriptScanner


HEAL_COMMAND = 'command /heal:\n    trigger:\n        heal player'

SAMPLE_SKRIPT = '''# Sample plugin
options:
    prefix: &7[&bShop&7]
    max-uses: 3
    debug: false
    greeting: hello there

command /shop <text> <number>:
    permission: shop.use
    trigger:
        if arg-1 is "buy":
            send "{@prefix} Buying"
        set {_cooldown} to now

on join:
    if player has played before:
        send "Welcome back" to player
    set {shop::%player%} to 0

function payout(p: player, amount: number):
    add {_amount} to {balance::%{_p}%}
    return true

on death:
    loop all players:
        send "%victim% died" to loop-player
'''


def command_file(count: int, prefix: str = "cmd") -> str:
    """Skript source with `count` unprotected commands and nothing else."""
    return "\n".join(
        f"command /{prefix}{n}:\n    trigger:\n        stop" for n in range(count)
    )


@pytest.fixture
def scanner():
    return SkriptScanner()


@pytest.fixture
def sample_skript():
    return SAMPLE_SKRIPT
