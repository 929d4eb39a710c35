import unittest
from unittest.mock import patch

from econobook.cli.prompt_editor import (
    Section,
    combine_sections,
    edit_in_editor,
    edit_prompt,
    get_editor_command,
    split_into_sections,
)

PROMPT = (
    "Please write an educational chapter about Savings.\n"
    "\n"
    "Essential Context:\n"
    "- Protagonist: Bart, age 10\n"
    "\n"
    "## Specific Instructions\n"
    "- Avoid jargon"
)


class TestSections(unittest.TestCase):

    def test_split_titles_sections_by_first_line(self):
        sections = split_into_sections(PROMPT)

        self.assertEqual([s.id for s in sections], [1, 2, 3])
        self.assertEqual(sections[1].title, "Essential Context")
        self.assertEqual(sections[2].title, "Specific Instructions")
        self.assertEqual(sections[1].content, "Essential Context:\n- Protagonist: Bart, age 10")

    def test_untitled_section_gets_numbered_title(self):
        sections = split_into_sections("Intro\n\n---\nbody")
        self.assertEqual(sections[1].title, "Section 2")

    def test_combine_restores_prompt(self):
        self.assertEqual(combine_sections(split_into_sections(PROMPT)), PROMPT)
        self.assertEqual(combine_sections([Section(1, "a", "A"), Section(2, "b", "B")]), "A\n\nB")


class TestEditor(unittest.TestCase):

    @patch.dict("os.environ", {"EDITOR": "", "VISUAL": "vim -n"})
    def test_editor_command_prefers_environment(self):
        self.assertEqual(get_editor_command(), "vim -n")

    @patch.dict("os.environ", {"EDITOR": "", "VISUAL": ""})
    def test_editor_command_defaults_to_nano(self):
        self.assertEqual(get_editor_command(), "nano")

    @patch.dict("os.environ", {"EDITOR": "code --wait"})
    @patch("econobook.cli.prompt_editor.subprocess.run")
    def test_edit_in_editor_reads_back_file(self, mock_run):
        def fake_editor(command, check):
            self.assertEqual(command[:2], ["code", "--wait"])
            self.assertTrue(command[2].endswith(".md"))
            with open(command[2], "w", encoding="utf-8") as f:
                f.write("edited text")

        mock_run.side_effect = fake_editor

        self.assertEqual(edit_in_editor("original"), "edited text")

    @patch("econobook.cli.prompt_editor.edit_in_editor", return_value="Essential Context:\n- Protagonist: Lisa\n")
    @patch("econobook.cli.prompt_editor.select", side_effect=["edit", 2, "save"])
    def test_edit_prompt_replaces_chosen_section(self, mock_select, mock_edit):
        result = edit_prompt(PROMPT)

        self.assertIn("Essential Context:\n- Protagonist: Lisa\n\n## Specific Instructions", result)
        self.assertNotIn("Bart", result.split("\n\n")[1])
        mock_edit.assert_called_once_with("Essential Context:\n- Protagonist: Bart, age 10")

    @patch("econobook.cli.prompt_editor.edit_in_editor", return_value="changed")
    @patch("econobook.cli.prompt_editor.select", side_effect=["edit", 1, "cancel"])
    def test_cancel_returns_original(self, mock_select, mock_edit):
        self.assertEqual(edit_prompt(PROMPT), PROMPT)

    @patch("econobook.cli.prompt_editor.edit_in_editor", return_value="   ")
    @patch("econobook.cli.prompt_editor.select", side_effect=["edit", 1, "save"])
    def test_empty_edit_keeps_section(self, mock_select, mock_edit):
        self.assertEqual(edit_prompt(PROMPT), PROMPT)


if __name__ == "__main__":
    unittest.main()
