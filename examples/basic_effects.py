"""
Basic effects: environment access, composition, recovery and parallel ap.

Run: python examples/basic_effects.py
"""
import asyncio

from rtepy import effect as RTE
from rtepy import ConsoleLogger, Runtime, pipe, traced


USERS = {1: "ada", 2: "grace"}


async def fetch_user(env, user_id):
    await asyncio.sleep(0.01)
    return env["users"][user_id]


def load_user(user_id):
    return RTE.try_catch(lambda env: fetch_user(env, user_id), lambda ex: f"no user {ex}")


def greet(name):
    return RTE.asks(lambda env: f"{env['greeting']}, {name}")


async def main():
    logger = ConsoleLogger(level="DEBUG")
    rt = Runtime({"users": USERS, "greeting": "hello"}, logger=logger)

    # sequential: load then greet
    hello = pipe(load_user(1), RTE.chain(greet), traced("hello", logger))
    print(await rt.run(hello))

    # recovery: missing user falls back to a guest greeting
    guest = pipe(load_user(9), RTE.or_else(lambda e: greet("guest")))
    print(await rt.run(guest))

    # independent: both lookups run concurrently, then combine
    both = pipe(
        load_user(1),
        RTE.map(lambda a: lambda b: f"{a} & {b}"),
        RTE.ap(load_user(2)),
    )
    print(await rt.run(both))

    # dependency injection: same effect under a derived environment
    shouting = pipe(hello, RTE.local(lambda env: {**env, "greeting": "HEY"}))
    print(await rt.run(shouting))


if __name__ == "__main__":
    asyncio.run(main())
