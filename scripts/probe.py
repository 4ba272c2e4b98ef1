from collections import Counter
import os, sys

# Ensure project root is on sys.path
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from bowling.session import GameConfig, GameSession
from model.adapter import BotRollSource, RollStream


def run(seed: int):
    """Play one bot against bot game and return both final scores.

    Each seat gets its own seeded bot so games are reproducible.
    """
    session = GameSession(GameConfig(player_name='A', bot_name='B', seed=seed, autoplay=True))
    sources = [BotRollSource(seed * 2), BotRollSource(seed * 2 + 1)]
    for _ in RollStream(session, sources):
        pass
    return session.total(0), session.total(1)


def probe(label, n=200):
    """Play many games and print simple distribution info.

    This is a rough way to eyeball how strong the bot is.
    """
    buckets = Counter()
    totals = []
    ties = 0
    for s in range(n):
        a, b = run(s)
        totals.extend((a, b))
        if a == b:
            ties += 1
        buckets[a // 25 * 25] += 1
        buckets[b // 25 * 25] += 1
    mean = sum(totals) / len(totals)
    print(f"\n[{label}] games: {n}  mean score: {round(mean, 1)}  best: {max(totals)}  ties: {ties}")
    for k in sorted(buckets):
        print(f"{k:>3}-{k + 24:<3} {buckets[k]}")


def main():
    """Run the probe with the default bot."""
    probe('house bot')


if __name__ == '__main__':
    main()
