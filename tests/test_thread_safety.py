"""Thread safety tests for rendering.

Nodes and options are immutable and every render owns its StringBuilder,
so one renderer and one tree can be shared by many threads. These tests
use real threading to catch actual concurrency bugs.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed

from xmlbuilder import RenderOptions, XmlRenderer, document, element, render


def _tree(index: int):
    return document(
        "catalog",
        {"id": index},
        [element("item", {"n": n}, f"value {index}-{n} & more") for n in range(20)],
    )


class TestConcurrentRendering:
    """Verify concurrent renders produce the same output as serial ones."""

    def test_shared_renderer_shared_tree(self) -> None:
        renderer = XmlRenderer()
        tree = _tree(0)
        expected = renderer.render(tree)

        with ThreadPoolExecutor(max_workers=8) as executor:
            futures = [executor.submit(renderer.render, tree) for _ in range(50)]
            results = [future.result() for future in as_completed(futures)]

        assert all(result == expected for result in results)

    def test_different_trees_and_formats(self) -> None:
        jobs = [(index, "none" if index % 2 else "indented") for index in range(40)]
        expected = {job: render(_tree(job[0]), format=job[1]) for job in jobs}

        def work(job: tuple[int, str]) -> tuple[tuple[int, str], str]:
            return job, render(_tree(job[0]), format=job[1])

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = dict(executor.map(work, jobs))

        assert results == expected

    def test_renderers_with_different_options(self) -> None:
        compact = XmlRenderer(RenderOptions(format="none"))
        pretty = XmlRenderer(RenderOptions())
        tree = _tree(7)

        with ThreadPoolExecutor(max_workers=4) as executor:
            compact_futures = [executor.submit(compact.render, tree) for _ in range(20)]
            pretty_futures = [executor.submit(pretty.render, tree) for _ in range(20)]

        assert {f.result() for f in compact_futures} == {compact.render(tree)}
        assert {f.result() for f in pretty_futures} == {pretty.render(tree)}
        assert "\n" not in compact.render(tree)
