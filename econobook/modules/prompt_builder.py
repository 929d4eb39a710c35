# filename: prompt_builder.py
"""Module to build the chat prompts for chapter drafts and for the personalization pass."""

import json

from econobook.libs.chapters import BOOK_CONTENT, ordered_categories


PERSONALIZATION_MARKER = "Please review and adapt"

PRONOUNS = {
    "boy": {"subject": "he", "object": "him", "possessive": "his"},
    "girl": {"subject": "she", "object": "her", "possessive": "her"},
}
PRONOUNS["male"] = PRONOUNS["boy"]
PRONOUNS["female"] = PRONOUNS["girl"]


def pronouns_for(gender):
    """Pronoun set for a gender value; anything unrecognized gets the "boy" set."""
    key = gender.strip().lower() if isinstance(gender, str) else ""
    return PRONOUNS.get(key, PRONOUNS["boy"])


def _is_empty(value):
    return value is None or value == "" or value == [] or value == {}


def clean_story_variables(value):
    """Recursively prune empty values from a story-variable tree.

    Lists drop None elements and elements that clean down to nothing; dicts keep a key
    only if its cleaned value is not None, "", [] or {}. A container left empty
    collapses to None. Scalars are returned unchanged.

    Args:
        value: str, number, bool, list or dict (nested arbitrarily).

    Returns:
        The pruned tree, or None if nothing is left.
    """
    if isinstance(value, list):
        cleaned = [clean_story_variables(item) for item in value if item is not None]
        cleaned = [item for item in cleaned if not _is_empty(item)]
        return cleaned or None

    if isinstance(value, dict):
        cleaned = {}
        for key, item in value.items():
            item = clean_story_variables(item)
            if not _is_empty(item):
                cleaned[key] = item
        return cleaned or None

    return value


def _capitalize(word):
    return word[:1].upper() + word[1:]


def build_character_context(characters, include_friends=True, include_siblings=True, include_pet=True):
    characters = characters or {}
    name = characters.get("protagonistName") or "the protagonist"
    age = characters.get("protagonistAge")
    pronouns = pronouns_for(characters.get("protagonistGender"))

    if age:
        context = f"Our story's protagonist is {name}, a {age}-year-old child."
    else:
        context = f"Our story's protagonist is {name}, a young child."

    friends = [f for f in characters.get("friendsNames") or [] if f]
    if include_friends and friends:
        context += f" {_capitalize(pronouns['subject'])} has good friends named {', '.join(friends)}."

    siblings = [s for s in characters.get("siblingsNamesAges") or [] if s and s[0]]
    if include_siblings and siblings:
        descriptions = ", ".join(
            f"{s[0]} who is {s[1]} years old" if len(s) > 1 and s[1] else s[0] for s in siblings
        )
        context += f" {_capitalize(pronouns['possessive'])} siblings are {descriptions}."

    pet_name = characters.get("petName")
    pet_type = characters.get("petType")
    if include_pet and pet_name and pet_type:
        context += (f" {_capitalize(pronouns['possessive'])} pet {pet_name}, a {pet_type}, "
                    f"accompanies {pronouns['object']} on adventures.")

    return context.strip()


def build_location_context(places):
    places = places or {}
    city = places.get("cityName")
    school = places.get("schoolName")
    where = f"in {city}" if city else "in a friendly town"
    attends = f"they attend {school}" if school else "they go to school"
    return f"The story takes place {where}, where {attends}."


def build_family_context(family_and_emotions):
    parents = [p for p in (family_and_emotions or {}).get("parentsNames") or [] if p]
    if not parents:
        return ""
    return f"Their parents, {' and '.join(parents)}, support their learning about economics."


def build_previous_chapters_context(previous_chapters):
    """Summarize earlier chapters given as dicts with "title", "summary" and optional "characters"."""
    if not previous_chapters:
        return ""

    summaries = []
    for chapter in previous_chapters:
        line = f'In "{chapter["title"]}", {chapter["summary"]}.'
        if chapter.get("characters"):
            line += f" Characters involved: {', '.join(chapter['characters'])}."
        summaries.append(line)

    return "Previously in the story:\n" + "\n".join(summaries) + "\n"


def _previous_context_block(current_context):
    if not current_context or not current_context.strip():
        return []
    return ["Previously in the story:", current_context.strip(), ""]


def build_chapter_prompt(topic, subtopics, story_variables=None, current_context=""):
    """Initial prompt for a lesson chapter. Only the protagonist's name and age are used here;
    the rest of the story variables are woven in by the personalization pass."""
    characters = (story_variables or {}).get("characters") or {}
    name = characters.get("protagonistName") or "the protagonist"
    age = characters.get("protagonistAge") or "young"

    lines = _previous_context_block(current_context) + [
        f"Please write an educational chapter about {topic} that covers the following concepts:",
        *[f"- {subtopic}" for subtopic in subtopics],
        "",
        "Essential Context:",
        f"- Protagonist: {name}, age {age}",
        "",
        "Specific Instructions:",
        "- Use situations and examples that children might experience in daily life",
        "- Include interactions with other characters when relevant to the topic",
        "- Maintain a friendly and educational tone",
        f"- Use analogies and examples appropriate for {age} children",
        "- Include small practical activities or exercises that children can do",
        "- Keep the narrative consistent with previous chapters",
        "- Avoid complex financial jargon",
        "- Start with a relatable scenario, explain the concept, provide examples, and end with an activity",
        "- Focus on the story and educational content, character details will be personalized later",
    ]
    return "\n".join(lines).strip()


def build_introduction_prompt(story_variables=None, book_content=BOOK_CONTENT):
    characters = (story_variables or {}).get("characters") or {}
    name = characters.get("protagonistName") or "our young protagonist"
    age = characters.get("protagonistAge") or "young"

    lines = [
        "Please write an engaging introduction for a children's book about economics.",
        "",
        "Essential Context:",
        f"- Protagonist: {name}, age {age}",
        "",
        "This book will cover the following areas:",
        *[f"- {category['title']}: {category['description']}" for category in ordered_categories(book_content)],
        "",
        "Specific Instructions:",
        "- Create an inviting and warm welcome to the book",
        "- Introduce the protagonist and their curiosity about economics",
        "- Briefly mention what readers will learn",
        "- Keep the tone friendly and exciting",
        "- Make economics sound fun and relevant to daily life",
        f"- Use language appropriate for {age} children",
        "- End with an encouraging message about learning economics",
        "- Keep it concise (around 2-3 paragraphs)",
        "- Focus on the story and educational content, character details will be personalized later",
    ]
    return "\n".join(lines)


def build_conclusion_prompt(story_variables=None, current_context=""):
    characters = (story_variables or {}).get("characters") or {}
    name = characters.get("protagonistName") or "our young protagonist"
    age = characters.get("protagonistAge") or "young"

    lines = _previous_context_block(current_context) + [
        "Please write a warm conclusion for a children's book about economics.",
        "",
        "Essential Context:",
        f"- Protagonist: {name}, age {age}",
        "",
        "Specific Instructions:",
        f"- Show {name} reflecting on everything they learned throughout the book",
        "- Have them share their new knowledge with their family and friends",
        "- Briefly recall the most important lessons without repeating whole chapters",
        "- Keep the tone proud, hopeful and encouraging",
        f"- Use language appropriate for {age} children",
        "- End by inviting readers to keep practicing what they learned in their daily life",
        "- Keep it concise (around 2-3 paragraphs)",
        "- Focus on the story and educational content, character details will be personalized later",
    ]
    return "\n".join(lines).strip()


def _personalization_prompt(kind, content, context, preserve, modifications, background=""):
    lines = [
        f"{PERSONALIZATION_MARKER} the following {kind} to naturally incorporate relevant details from the "
        "provided context.",
        f"Make small modifications where necessary (e.g., {modifications}), but maintain the core",
        f"{preserve}. Only use details where they fit naturally.",
        "",
    ]
    if background:
        lines += ["Story background:", background, ""]
    lines += [
        "Original Text:",
        content,
        "",
        "Available Context (use only where appropriate):",
        json.dumps(context, indent=2, ensure_ascii=False),
        "",
        "Instructions:",
        f"- Keep the core {'story and educational content' if kind == 'text' else preserve} intact",
        f"- Weave in context details naturally where they enhance the {'story' if kind == 'text' else kind}",
        "- Make minimal changes necessary to incorporate relevant details",
        "- Maintain the original tone and flow",
        "- Ensure any added details feel organic to the narrative",
    ]
    return "\n".join(lines)


def personalize_chapter_content(content, story_variables=None, previous_chapters=None):
    """Edit-pass prompt that weaves the pruned story variables into a drafted chapter.

    previous_chapters (list of {"title", "summary"} dicts) keeps the edit consistent with accepted chapters.
    """
    story_variables = story_variables or {}
    background = " ".join(part for part in (
        build_character_context(story_variables.get("characters")),
        build_location_context(story_variables.get("places")),
        build_family_context(story_variables.get("familyAndEmotions")),
    ) if part)
    previous = build_previous_chapters_context(previous_chapters).strip()
    if previous:
        background = f"{background}\n\n{previous}" if background else previous

    return _personalization_prompt(
        "text",
        content,
        clean_story_variables(story_variables),
        preserve="narrative and educational content",
        modifications="adding mentioned siblings or locations",
        background=background,
    )


def personalize_introduction_content(content, story_variables=None):
    return _personalization_prompt(
        "introduction",
        content,
        clean_story_variables(story_variables or {}),
        preserve="welcome message and educational overview",
        modifications="adding location, family details",
    )


def personalize_conclusion_content(content, story_variables=None):
    return _personalization_prompt(
        "conclusion",
        content,
        clean_story_variables(story_variables or {}),
        preserve="reflection and closing message",
        modifications="mentioning family members, friends or favorite places",
    )


def is_personalization_prompt(prompt):
    return isinstance(prompt, str) and prompt.lstrip().startswith(PERSONALIZATION_MARKER)
