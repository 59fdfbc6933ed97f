from unittest import TestCase

from event_schema_codegen.pipeline.config import GeneratorOptions, Language


class TestGeneratorOptions(TestCase):
    """Test generation options handling"""

    def test_defaults(self):
        options = GeneratorOptions()
        self.assertEqual(options.language, Language.TYPESCRIPT)
        self.assertTrue(options.def_support)
        self.assertFalse(options.unique_enums)
        self.assertEqual(options.custom_type_description, "Custom type for {source}")

    def test_from_dict(self):
        options = GeneratorOptions.from_dict({"language": "kotlin", "unique_enums": True})
        self.assertEqual(options.language, Language.KOTLIN)
        self.assertTrue(options.unique_enums)
        self.assertTrue(options.def_support)

    def test_from_dict_ignores_unknown_keys(self):
        options = GeneratorOptions.from_dict({"sdk": "web", "def_support": False})
        self.assertFalse(options.def_support)
        self.assertFalse(hasattr(options, "sdk"))

    def test_from_dict_rejects_unknown_language(self):
        with self.assertRaises(ValueError):
            GeneratorOptions.from_dict({"language": "cobol"})

    def test_to_dict_round_trip(self):
        options = GeneratorOptions(language=Language.CSHARP, unique_enums=True)
        d = options.to_dict()
        self.assertEqual(d["language"], "cs")
        self.assertEqual(GeneratorOptions.from_dict(d), options)

    def test_language_is_a_string(self):
        self.assertEqual(Language("python"), Language.PYTHON)
        self.assertEqual(Language.PYTHON, "python")
