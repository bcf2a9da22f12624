import asyncio
import unittest

from rtepy import effect as RTE
from rtepy import task as T
from rtepy import Ok, Err, Some, NONE, IO, Task, pipe, run
from rtepy.effect import Effect, right, left, reader_task_result, reader_task_result_seq
from rtepy.typeclass import Alt, Bifunctor, MonadTask


class TestConstructors(unittest.IsolatedAsyncioTestCase):
    async def test_lifts(self):
        env = {"n": 2}
        self.assertEqual(await run(RTE.right_task(T.of(1)), env), Ok(1))
        self.assertEqual(await run(RTE.left_task(T.of("t")), env), Err("t"))
        self.assertEqual(await run(RTE.right_io(IO(lambda: 3)), env), Ok(3))
        self.assertEqual(await run(RTE.left_io(lambda: "io"), env), Err("io"))
        self.assertEqual(await run(RTE.right_reader(lambda r: r["n"]), env), Ok(2))
        self.assertEqual(await run(RTE.left_reader(lambda r: f"bad n={r['n']}"), env), Err("bad n=2"))
        self.assertEqual(await run(RTE.from_result(Err("r")), env), Err("r"))
        self.assertEqual(await run(RTE.from_io_result(lambda: Ok(4)), env), Ok(4))
        self.assertEqual(await run(RTE.from_task_result(T.of(Ok(5))), env), Ok(5))

    async def test_ask(self):
        env = {"n": 1}
        res = await run(RTE.ask(), env)
        self.assertIs(res.value, env)

    async def test_from_option(self):
        missing = RTE.from_option(lambda: "missing")
        self.assertEqual(await run(missing(Some(1)), {}), Ok(1))
        self.assertEqual(await run(missing(NONE), {}), Err("missing"))

    async def test_from_predicate(self):
        even = RTE.from_predicate(lambda n: n % 2 == 0, lambda n: f"{n} is odd")
        self.assertEqual(await run(even(4), {}), Ok(4))
        self.assertEqual(await run(even(3), {}), Err("3 is odd"))

    async def test_try_catch(self):
        async def lookup(r):
            return r["key"]

        eff = RTE.try_catch(lookup, lambda ex: f"missing:{ex}")
        self.assertEqual(await run(eff, {"key": "v"}), Ok("v"))
        self.assertEqual(await run(eff, {}), Err("missing:'key'"))


class TestApply(unittest.IsolatedAsyncioTestCase):
    async def test_ap_independent_runs_both_sides_on_failure(self):
        ran = []

        def side(name, res):
            return RTE.right_io(lambda: ran.append(name)).chain(lambda _: RTE.from_result(res))

        eff = pipe(side("f", Err("f-err")), RTE.ap(side("v", Err("v-err"))))
        self.assertEqual(await run(eff, {}), Err("f-err"))
        self.assertEqual(sorted(ran), ["f", "v"])

    async def test_ap_seq_skips_value_side_on_failure(self):
        ran = []
        value_side = RTE.right_io(lambda: ran.append("v"))
        self.assertEqual(await run(pipe(left("f-err"), RTE.ap_seq(value_side)), {}), Err("f-err"))
        self.assertEqual(ran, [])
        self.assertEqual(await run(pipe(right(lambda x: x + 1), RTE.ap_seq(right(1))), {}), Ok(2))

    async def test_ap_value_failure(self):
        self.assertEqual(await run(right(lambda x: x).ap(left("v-err")), {}), Err("v-err"))

    async def test_ap_first_second(self):
        self.assertEqual(await run(pipe(right(1), RTE.ap_first(right(2))), {}), Ok(1))
        self.assertEqual(await run(pipe(right(1), RTE.ap_second(right(2))), {}), Ok(2))
        self.assertEqual(await run(pipe(right(1), RTE.ap_first(left("e"))), {}), Err("e"))

    async def test_parallel_ap_overlaps_branches(self):
        async def fn(r):
            await asyncio.wait_for(r["started"].wait(), timeout=1)
            return lambda x: x + 1

        async def val(r):
            r["started"].set()
            return 1

        env = {"started": asyncio.Event()}
        eff = RTE.try_catch(fn, repr).ap(RTE.try_catch(val, repr))
        self.assertEqual(await run(eff, env), Ok(2))

    async def test_parallel_ap_function_failure_wins_when_it_settles_last(self):
        settled = []

        async def slow_fn(_):
            await asyncio.sleep(0.02)
            settled.append("f")
            raise ValueError("f-err")

        async def fast_val(_):
            settled.append("v")
            raise ValueError("v-err")

        eff = RTE.try_catch(slow_fn, str).ap(RTE.try_catch(fast_val, str))
        self.assertEqual(await run(eff, {}), Err("f-err"))
        self.assertEqual(settled, ["v", "f"])

    async def test_parallel_ap_starts_branches_left_to_right(self):
        started = []

        def branch(name, value):
            async def go(_):
                started.append(name)
                await asyncio.sleep(0)
                return value
            return RTE.try_catch(go, repr)

        eff = branch("f", lambda x: x + 1).ap(branch("v", 1))
        self.assertEqual(await run(eff, {}), Ok(2))
        self.assertEqual(started, ["f", "v"])

    async def test_sequential_ap_waits_for_function_side(self):
        order = []

        async def fn(_):
            await asyncio.sleep(0.01)
            order.append("fn")
            return lambda x: x * 2

        async def val(_):
            order.append("val")
            return 4

        eff = RTE.try_catch(fn, repr).ap_seq(RTE.try_catch(val, repr))
        self.assertEqual(await run(eff, {}), Ok(8))
        self.assertEqual(order, ["fn", "val"])

    async def test_instances(self):
        self.assertIsInstance(reader_task_result, MonadTask)
        self.assertIsInstance(reader_task_result, Bifunctor)
        self.assertIsInstance(reader_task_result, Alt)
        mab = reader_task_result_seq.of(lambda x: x + 1)
        self.assertEqual(await run(reader_task_result_seq.ap(mab, right(1)), {}), Ok(2))
        self.assertEqual(await run(reader_task_result.from_io(lambda: 1), {}), Ok(1))
        self.assertEqual(await run(reader_task_result.from_task(T.of(2)), {}), Ok(2))


class TestSequencing(unittest.IsolatedAsyncioTestCase):
    async def test_chain_first_keeps_value(self):
        seen = []
        eff = pipe(right(3), RTE.chain_first(lambda a: RTE.right_io(lambda: seen.append(a))))
        self.assertEqual(await run(eff, {}), Ok(3))
        self.assertEqual(seen, [3])
        self.assertEqual(await run(pipe(right(3), RTE.chain_first(lambda a: left("side"))), {}), Err("side"))

    async def test_flatten(self):
        self.assertEqual(await run(RTE.flatten(right(right(1))), {}), Ok(1))
        self.assertEqual(await run(RTE.flatten(right(left("inner"))), {}), Err("inner"))

    async def test_chain_sees_same_environment(self):
        env = {"k": 1}
        eff = RTE.ask().chain(lambda r1: RTE.ask().map(lambda r2: r1 is r2))
        self.assertEqual(await run(eff, env), Ok(True))


class TestAltAndBifunctor(unittest.IsolatedAsyncioTestCase):
    async def test_alt_lazy_on_success(self):
        def boom():
            raise AssertionError("second branch evaluated")

        self.assertEqual(await run(pipe(right(1), RTE.alt(boom)), {}), Ok(1))

    async def test_alt_falls_back_with_same_environment(self):
        eff = left("first").alt(lambda: RTE.asks(lambda r: r["fallback"]))
        self.assertEqual(await run(eff, {"fallback": "fb"}), Ok("fb"))
        self.assertEqual(await run(left("a").alt(lambda: left("b")), {}), Err("b"))

    async def test_bimap_map_left(self):
        self.assertEqual(await run(pipe(left("e"), RTE.bimap(str.upper, str)), {}), Err("E"))
        self.assertEqual(await run(pipe(right(1), RTE.bimap(str.upper, str)), {}), Ok("1"))
        self.assertEqual(await run(pipe(left("e"), RTE.map_left(len)), {}), Err(1))
        self.assertEqual(await run(pipe(right(1), RTE.map_left(len)), {}), Ok(1))


class TestRecovery(unittest.IsolatedAsyncioTestCase):
    async def test_fold_runs_exactly_one_handler(self):
        calls = []

        def on_err(e):
            calls.append(("err", e))
            return lambda r: T.of(f"L:{e}:{r['tag']}")

        def on_ok(a):
            calls.append(("ok", a))
            return lambda r: T.of(f"R:{a}:{r['tag']}")

        folded = RTE.fold(on_err, on_ok)
        env = {"tag": "t"}
        self.assertEqual(await folded(left("x"))(env)(), "L:x:t")
        self.assertEqual(calls, [("err", "x")])
        calls.clear()
        self.assertEqual(await right(2).fold(on_err, on_ok)(env)(), "R:2:t")
        self.assertEqual(calls, [("ok", 2)])

    async def test_get_or_else(self):
        recover = RTE.get_or_else(lambda e: lambda r: T.of(r["default"]))
        self.assertEqual(await recover(left("e"))({"default": 0})(), 0)
        self.assertEqual(await recover(right(5))({"default": 0})(), 5)

    async def test_or_else_passthrough_never_calls_handler(self):
        def handler(e):
            raise AssertionError("handler called on success")

        self.assertEqual(await run(right("a").or_else(handler), {}), Ok("a"))

    async def test_or_else_can_change_error(self):
        eff = pipe(left("e"), RTE.or_else(lambda e: left(len(e))))
        self.assertEqual(await run(eff, {}), Err(1))


class TestEnvironment(unittest.IsolatedAsyncioTestCase):
    async def test_local_does_not_mutate_caller_environment(self):
        env = {"n": 1}
        eff = RTE.asks(lambda r: r["n"]).local(lambda q: {**q, "n": q["n"] * 10})
        self.assertEqual(await run(eff, env), Ok(10))
        self.assertEqual(env, {"n": 1})

    async def test_nested_local(self):
        inner = RTE.asks(lambda r: r)
        eff = pipe(inner, RTE.local(lambda q: q + 1), RTE.local(lambda q: q * 2))
        self.assertEqual(await run(eff, 3), Ok(7))

    async def test_effect_wraps_any_task_result_function(self):
        eff: Effect = Effect(lambda r: Task(lambda: _settle(r)))
        self.assertEqual(await run(eff, "x"), Ok("x"))


async def _settle(v):
    await asyncio.sleep(0)
    return Ok(v)
