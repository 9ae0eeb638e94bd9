import unittest

from src.sitemap.application.diagnostics import DiagnosticsContext, with_warnings


class WithWarningsTests(unittest.TestCase):
    def test_sets_flag_for_body_and_restores_it(self):
        context = DiagnosticsContext(verbose=False)
        seen = []

        result = with_warnings(context, True, lambda: seen.append(context.verbose) or "done")

        self.assertEqual(result, "done")
        self.assertEqual(seen, [True])
        self.assertFalse(context.verbose)

    def test_restores_flag_when_body_raises(self):
        context = DiagnosticsContext(verbose=True)

        def body():
            raise RuntimeError("boom")

        with self.assertRaises(RuntimeError) as ctx:
            with_warnings(context, False, body)

        self.assertEqual(str(ctx.exception), "boom")
        self.assertTrue(context.verbose)

    def test_emit_only_echoes_when_verbose(self):
        lines = []
        context = DiagnosticsContext(echo=lines.append)

        context.emit("quiet")
        with context.scoped(True):
            context.emit("loud")

        self.assertEqual(lines, ["loud"])
