import json
import unittest

from econobook.libs.chapters import BOOK_CONTENT
from econobook.modules.prompt_builder import (
    PERSONALIZATION_MARKER,
    build_chapter_prompt,
    build_character_context,
    build_conclusion_prompt,
    build_family_context,
    build_introduction_prompt,
    build_location_context,
    build_previous_chapters_context,
    clean_story_variables,
    is_personalization_prompt,
    personalize_chapter_content,
    personalize_conclusion_content,
    personalize_introduction_content,
    pronouns_for,
)

STORY_VARIABLES = {
    "characters": {
        "protagonistName": "Bart",
        "protagonistAge": "10",
        "protagonistGender": "boy",
        "friendsNames": ["Milhouse", None, ""],
        "siblingsNamesAges": [["Lisa", "8"], ["Maggie", "1"]],
        "petName": "",
        "petType": "",
    },
    "places": {"cityName": "Springfield", "schoolName": "", "favoritePlaces": []},
    "familyAndEmotions": {"parentsNames": ["Homer", "Marge"], "grandparentsNames": []},
    "interests": {"favoriteSport": "", "favoriteToy": ""},
}


class TestCleanStoryVariables(unittest.TestCase):

    def test_prunes_empty_values_recursively(self):
        cleaned = clean_story_variables(STORY_VARIABLES)

        self.assertEqual(cleaned["characters"]["friendsNames"], ["Milhouse"])
        self.assertNotIn("petName", cleaned["characters"])
        self.assertEqual(cleaned["places"], {"cityName": "Springfield"})
        self.assertEqual(cleaned["familyAndEmotions"], {"parentsNames": ["Homer", "Marge"]})
        self.assertNotIn("interests", cleaned)

    def test_never_emits_empty_values(self):
        def walk(value):
            self.assertNotIn(value, (None, "", [], {}))
            if isinstance(value, dict):
                for item in value.values():
                    walk(item)
            elif isinstance(value, list):
                for item in value:
                    walk(item)

        walk(clean_story_variables(STORY_VARIABLES))

    def test_is_idempotent(self):
        once = clean_story_variables(STORY_VARIABLES)
        self.assertEqual(clean_story_variables(once), once)

    def test_nested_empty_lists_are_dropped(self):
        self.assertEqual(clean_story_variables({"a": [[], [None], ["", "x"]]}), {"a": [["x"]]})

    def test_empty_tree_collapses_to_none(self):
        self.assertIsNone(clean_story_variables({"a": {"b": ""}, "c": []}))
        self.assertIsNone(clean_story_variables([None, ""]))

    def test_scalars_are_unchanged(self):
        self.assertEqual(clean_story_variables(0), 0)
        self.assertIs(clean_story_variables(False), False)
        self.assertEqual(clean_story_variables({"n": 0, "flag": False}), {"n": 0, "flag": False})


class TestContextBuilders(unittest.TestCase):

    def test_pronouns_fall_back_to_boy(self):
        self.assertEqual(pronouns_for("girl")["subject"], "she")
        self.assertEqual(pronouns_for("Female")["possessive"], "her")
        self.assertEqual(pronouns_for("male")["subject"], "he")
        self.assertEqual(pronouns_for("other")["subject"], "he")
        self.assertEqual(pronouns_for(None)["object"], "him")

    def test_character_context(self):
        context = build_character_context({
            "protagonistName": "Lisa",
            "protagonistAge": "8",
            "protagonistGender": "girl",
            "friendsNames": ["Janey"],
            "siblingsNamesAges": [["Bart", "10"]],
            "petName": "Snowball",
            "petType": "cat",
        })

        self.assertTrue(context.startswith("Our story's protagonist is Lisa, a 8-year-old child."))
        self.assertIn("She has good friends named Janey.", context)
        self.assertIn("Her siblings are Bart who is 10 years old.", context)
        self.assertIn("Her pet Snowball, a cat, accompanies her on adventures.", context)

    def test_location_and_family_context(self):
        self.assertEqual(
            build_location_context({"cityName": "Springfield", "schoolName": "Springfield Elementary"}),
            "The story takes place in Springfield, where they attend Springfield Elementary.",
        )
        self.assertEqual(build_family_context({"parentsNames": []}), "")
        self.assertIn("Homer and Marge", build_family_context({"parentsNames": ["Homer", "Marge"]}))

    def test_previous_chapters_context(self):
        self.assertEqual(build_previous_chapters_context([]), "")
        context = build_previous_chapters_context([
            {"title": "Saving", "summary": "Bart saved coins", "characters": ["Bart", "Lisa"]},
        ])
        self.assertTrue(context.startswith("Previously in the story:\n"))
        self.assertIn('In "Saving", Bart saved coins. Characters involved: Bart, Lisa.', context)


class TestPrompts(unittest.TestCase):

    def test_chapter_prompt_uses_only_name_and_age(self):
        prompt = build_chapter_prompt("Budgets", ["Planning money"], STORY_VARIABLES)

        self.assertIn("Please write an educational chapter about Budgets", prompt)
        self.assertIn("- Planning money", prompt)
        self.assertIn("- Protagonist: Bart, age 10", prompt)
        self.assertIn("end with an activity", prompt)
        self.assertNotIn("Springfield", prompt)
        self.assertNotIn("Milhouse", prompt)
        self.assertNotIn("Previously in the story", prompt)

    def test_chapter_prompt_defaults_and_context(self):
        prompt = build_chapter_prompt("Budgets", [], {}, current_context='In "Intro": Bart met money.')

        self.assertTrue(prompt.startswith("Previously in the story:"))
        self.assertIn("- Protagonist: the protagonist, age young", prompt)

    def test_introduction_prompt_lists_categories(self):
        prompt = build_introduction_prompt(STORY_VARIABLES)

        self.assertIn("Please write an engaging introduction for a children's book about economics", prompt)
        for category in BOOK_CONTENT:
            self.assertIn(f"- {category['title']}: {category['description']}", prompt)

    def test_conclusion_prompt(self):
        prompt = build_conclusion_prompt(STORY_VARIABLES, current_context="Bart learned to save.")

        self.assertIn("Previously in the story:\nBart learned to save.", prompt)
        self.assertIn("family and friends", prompt)

    def test_personalization_prompts_carry_marker_text_and_context(self):
        draft = "Bart opened a lemonade stand."
        for builder in (personalize_chapter_content, personalize_introduction_content,
                        personalize_conclusion_content):
            prompt = builder(draft, STORY_VARIABLES)

            self.assertTrue(prompt.startswith(PERSONALIZATION_MARKER))
            self.assertTrue(is_personalization_prompt(prompt))
            self.assertIn(f"Original Text:\n{draft}\n", prompt)
            self.assertIn(json.dumps(clean_story_variables(STORY_VARIABLES), indent=2), prompt)
            self.assertNotIn('"petName"', prompt)

    def test_chapter_personalization_has_story_background(self):
        prompt = personalize_chapter_content("Draft.", STORY_VARIABLES)

        self.assertIn("Story background:", prompt)
        self.assertIn("The story takes place in Springfield", prompt)

    def test_chapter_personalization_recalls_accepted_chapters(self):
        prompt = personalize_chapter_content("Draft.", STORY_VARIABLES, [
            {"title": "Needs and Wants", "summary": "Bart learned the difference between needs and wants"},
        ])

        background = prompt.split("Story background:\n", 1)[1].split("\n\nOriginal Text:", 1)[0]
        self.assertIn("Previously in the story:\n", background)
        self.assertIn('In "Needs and Wants", Bart learned the difference between needs and wants.', background)
        self.assertNotIn("Previously in the story", personalize_chapter_content("Draft.", STORY_VARIABLES))

    def test_initial_prompts_are_not_personalization_prompts(self):
        self.assertFalse(is_personalization_prompt(build_chapter_prompt("Budgets", [], STORY_VARIABLES)))
        self.assertFalse(is_personalization_prompt(""))
        self.assertFalse(is_personalization_prompt(None))


if __name__ == "__main__":
    unittest.main()
