import unittest
from unittest.mock import patch

from econobook.cli.configure_book import (
    _validate_age,
    ask_story_field,
    configure_image_generator,
    configure_openai,
    configure_story_variables,
)
from econobook.libs.story_variables import STORY_VARIABLES_TEMPLATE


@patch("econobook.cli.configure_book.display")
class TestConfigureProviders(unittest.TestCase):

    @patch("econobook.cli.configure_book.confirm", return_value=False)
    @patch("econobook.cli.configure_book.select", return_value="gpt-3.5-turbo")
    def test_openai_defaults(self, mock_select, mock_confirm, mock_display):
        config = configure_openai()

        self.assertEqual(config["chatModel"], "gpt-3.5-turbo")
        self.assertEqual(config["temperature"], 0.7)
        self.assertEqual(config["presence_penalty"], 0.4)

    @patch("econobook.cli.configure_book.ask_number", side_effect=[1.2, 0.8, 0.0, 0.1])
    @patch("econobook.cli.configure_book.confirm", return_value=True)
    @patch("econobook.cli.configure_book.select", return_value="gpt-4")
    def test_openai_custom_parameters(self, mock_select, mock_confirm, mock_number, mock_display):
        config = configure_openai({"chatModel": "gpt-4"})

        self.assertEqual(config, {"chatModel": "gpt-4", "temperature": 1.2, "top_p": 0.8,
                                  "frequency_penalty": 0.0, "presence_penalty": 0.1})
        self.assertEqual(mock_select.call_args.kwargs["default"], "gpt-4")

    @patch("econobook.cli.configure_book.select", side_effect=["openai", "dall-e-2", "512x512", "watercolor"])
    def test_openai_image_config(self, mock_select, mock_display):
        self.assertEqual(configure_image_generator(), {
            "provider": "openai",
            "openai": {"model": "dall-e-2", "size": "512x512"},
            "imageStyle": "watercolor",
        })

    @patch("econobook.cli.configure_book.ask_number", return_value=70)
    @patch("econobook.cli.configure_book.select", side_effect=["mystic", "fluid", "magnific_sharpy", "2k", "storybook"])
    def test_mystic_image_config(self, mock_select, mock_number, mock_display):
        config = configure_image_generator()

        self.assertEqual(config["mystic"], {"model": "fluid", "engine": "magnific_sharpy",
                                            "resolution": "2k", "creative_detailing": 70})
        self.assertTrue(mock_number.call_args.kwargs["integer"])


@patch("econobook.cli.configure_book.display")
class TestStoryVariables(unittest.TestCase):

    def test_age_validation(self, mock_display):
        self.assertIsNone(_validate_age(""))
        self.assertIsNone(_validate_age("9"))
        self.assertIsNotNone(_validate_age("0"))
        self.assertIsNotNone(_validate_age("18"))
        self.assertIsNotNone(_validate_age("nine"))

    @patch("econobook.cli.configure_book.ask_text", return_value="Maggie:1, Lisa:8, ,Hugo")
    def test_siblings_are_parsed(self, mock_ask, mock_display):
        self.assertEqual(ask_story_field("siblingsNamesAges", []),
                         [["Maggie", "1"], ["Lisa", "8"], ["Hugo", ""]])

    @patch("econobook.cli.configure_book.confirm", return_value=False)
    def test_declining_keeps_current_values(self, mock_confirm, mock_display):
        current = {"characters": {"protagonistName": "Bart"}}

        result = configure_story_variables(current)

        self.assertEqual(result["characters"]["protagonistName"], "Bart")
        self.assertEqual(set(result), set(STORY_VARIABLES_TEMPLATE))
        self.assertEqual(current, {"characters": {"protagonistName": "Bart"}})

    @patch("econobook.cli.configure_book.ask_story_field", return_value="filled")
    @patch("econobook.cli.configure_book.confirm")
    def test_only_empty_fields_are_asked(self, mock_confirm, mock_ask, mock_display):
        mock_confirm.side_effect = lambda question, default=False: question.startswith("Would you like to fill")
        current = {"places": {"cityName": "Springfield", "schoolName": "", "parkName": "",
                              "homeStreetName": "", "favoritePlaces": []}}

        result = configure_story_variables(current)

        self.assertEqual(result["places"]["cityName"], "Springfield")
        self.assertEqual(result["places"]["schoolName"], "filled")
        asked = [call.args[0] for call in mock_ask.call_args_list]
        self.assertNotIn("cityName", asked)


if __name__ == "__main__":
    unittest.main()
