import tempfile
import unittest
from pathlib import Path

from integrator.utils.config_loader import (
    ConfigError,
    IntegratorConfig,
    load_integrator_config,
    resolve_integrator_config,
)

REPO_CONFIG = Path(__file__).resolve().parents[2] / "configs" / "integrator.yml"


class ConfigLoaderTestCase(unittest.TestCase):
    def _write(self, tmpdir: str, content: str) -> str:
        path = Path(tmpdir) / "integrator.yml"
        path.write_text(content, encoding="utf-8")
        return str(path)

    def test_repository_config_loads(self) -> None:
        config = load_integrator_config(str(REPO_CONFIG))

        self.assertEqual(config.defaults.method, "simpson")
        self.assertEqual(config.defaults.count, 1000)
        self.assertEqual(config.defaults.function, "1")
        self.assertEqual(config.log_level, "INFO")
        self.assertFalse(config.json_output)

    def test_custom_values(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = self._write(
                tmpdir,
                "defaults:\n  method: trapezoidal\n  count: 64\n  function: 2\nlogging:\n  level: DEBUG\noutput:\n  json: true\n",
            )
            config = load_integrator_config(path)

        self.assertEqual(config.defaults.method, "trapezoidal")
        self.assertEqual(config.defaults.count, 64)
        self.assertEqual(config.defaults.function, "2")
        self.assertEqual(config.log_level, "DEBUG")
        self.assertTrue(config.json_output)

    def test_empty_file_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config = load_integrator_config(self._write(tmpdir, ""))

        self.assertEqual(config, IntegratorConfig())

    def test_missing_file_raises(self) -> None:
        with self.assertRaises(ConfigError):
            load_integrator_config("does/not/exist.yml")

    def test_non_mapping_root_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = self._write(tmpdir, "- 1\n- 2\n")
            with self.assertRaises(ConfigError):
                load_integrator_config(path)

    def test_invalid_count_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = self._write(tmpdir, "defaults:\n  count: lots\n")
            with self.assertRaises(ConfigError):
                load_integrator_config(path)

    def test_non_integral_count_raises(self) -> None:
        for value in ("4.5", "true", "'8'"):
            with self.subTest(value=value):
                with tempfile.TemporaryDirectory() as tmpdir:
                    path = self._write(tmpdir, "defaults:\n  count: {}\n".format(value))
                    with self.assertRaises(ConfigError) as ctx:
                        load_integrator_config(path)
                self.assertIn("defaults.count", str(ctx.exception))

    def test_log_level_is_normalized(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config = load_integrator_config(self._write(tmpdir, "logging:\n  level: debug\n"))

        self.assertEqual(config.log_level, "DEBUG")

    def test_unknown_log_level_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = self._write(tmpdir, "logging:\n  level: VERBOSE\n")
            with self.assertRaises(ConfigError) as ctx:
                load_integrator_config(path)
        self.assertIn("logging.level", str(ctx.exception))

    def test_invalid_yaml_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = self._write(tmpdir, "defaults: [unclosed\n")
            with self.assertRaises(ConfigError):
                load_integrator_config(path)

    def test_resolve_with_explicit_path(self) -> None:
        config = resolve_integrator_config(str(REPO_CONFIG))
        self.assertEqual(config.defaults.method, "simpson")

    def test_resolve_explicit_missing_path_raises(self) -> None:
        with self.assertRaises(ConfigError):
            resolve_integrator_config("missing.yml")


if __name__ == "__main__":
    unittest.main()
