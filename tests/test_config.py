import unittest

from app.pathcanon.config import (
    CWD_ENV,
    DRIVES_ENV,
    NormalizerConfig,
    build_normalizer,
    load_config,
    parse_drive_mappings,
)
from app.pathcanon.platform.drives import DriveMap, FixedWorkingDirectory, ProcessWorkingDirectory


class TestConfig(unittest.TestCase):
    def test_parse_drive_mappings(self) -> None:
        self.assertEqual(
            parse_drive_mappings(" c=/ ; T:=/tmp/work;"),
            {"C": "/", "T": "/tmp/work"},
        )
        self.assertEqual(parse_drive_mappings(""), {})

    def test_parse_drive_mappings_rejects_bad_entries(self) -> None:
        for text in ("C", "CD=/x", "C=", "=/x"):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    parse_drive_mappings(text)

    def test_load_config_defaults(self) -> None:
        config = load_config({})
        self.assertIsNone(config.working_directory)
        self.assertEqual(config.drive_map.mappings, DriveMap.default().mappings)

    def test_load_config_from_environment(self) -> None:
        config = load_config({DRIVES_ENV: "T=/tmp/x", CWD_ENV: r" T:\work "})
        self.assertEqual(config.drive_map.mappings, {"T": "/tmp/x"})
        self.assertFalse(config.drive_map.native)
        self.assertEqual(config.working_directory, r"T:\work")

    def test_build_normalizer(self) -> None:
        fixed = build_normalizer(NormalizerConfig(drive_map=DriveMap({"T": "/tmp/x"}), working_directory=r"T:\work"))
        self.assertIsInstance(fixed.working_directory, FixedWorkingDirectory)
        self.assertEqual(fixed.normalize(r"Q:\nowhere\.."), "Q:\\")

        process = build_normalizer(NormalizerConfig())
        self.assertIsInstance(process.working_directory, ProcessWorkingDirectory)


if __name__ == "__main__":
    unittest.main()
