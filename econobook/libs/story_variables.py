"""Empty story-variable template and the field tables the configuration prompts walk through."""

import copy

STORY_VARIABLES_TEMPLATE = {
    "characters": {
        "protagonistName": "",
        "protagonistAge": "",
        "protagonistGender": "",
        "visualDescription": "",
        "friendsNames": [],
        "siblingsNamesAges": [],
        "petName": "",
        "petType": "",
    },
    "places": {
        "cityName": "",
        "schoolName": "",
        "parkName": "",
        "homeStreetName": "",
        "favoritePlaces": [],
    },
    "interests": {
        "favoriteSport": "",
        "favoriteActivity": "",
        "favoriteToy": "",
        "favoriteSuperheroOrCharacter": "",
        "favoriteBook": "",
    },
    "familyAndEmotions": {
        "parentsNames": [],
        "grandparentsNames": [],
        "favoriteTeacherName": "",
        "favoriteFamilyActivity": "",
    },
    "circumstantialDetails": {
        "season": "",
        "specialDay": "",
        "favoriteFood": "",
        "favoriteClothing": "",
    },
    "conflictAndLearning": {
        "protagonistFear": "",
        "overcomeChallenge": "",
        "learnedSkill": "",
    },
    "storySpecificDetails": {
        "importantObject": "",
        "villainOrAntagonist": "",
        "helperOrMentor": "",
        "imaginaryOrFantasyPlace": "",
    },
}

SECTION_TITLES = {
    "characters": "Characters",
    "places": "Places",
    "interests": "Interests",
    "familyAndEmotions": "Family and Emotions",
    "circumstantialDetails": "Circumstantial Details",
    "conflictAndLearning": "Conflict and Learning",
    "storySpecificDetails": "Story-Specific Details",
}

# Question text per leaf; list-valued fields are asked comma separated
FIELD_LABELS = {
    "protagonistName": "Protagonist's name",
    "protagonistAge": "Protagonist's age",
    "protagonistGender": "Protagonist's gender (boy/girl)",
    "visualDescription": "Visual description of the protagonist (for illustrations)",
    "friendsNames": "Friends' names",
    "siblingsNamesAges": "Siblings (name:age)",
    "petName": "Pet's name",
    "petType": "Pet type",
    "cityName": "City name",
    "schoolName": "School name",
    "parkName": "Park name",
    "homeStreetName": "Home street",
    "favoritePlaces": "Favorite places",
    "favoriteSport": "Favorite sport",
    "favoriteActivity": "Favorite activity",
    "favoriteToy": "Favorite toy",
    "favoriteSuperheroOrCharacter": "Favorite superhero or character",
    "favoriteBook": "Favorite book",
    "parentsNames": "Parents' names",
    "grandparentsNames": "Grandparents' names",
    "favoriteTeacherName": "Favorite teacher's name",
    "favoriteFamilyActivity": "Favorite family activity",
    "season": "Season",
    "specialDay": "Special day",
    "favoriteFood": "Favorite food",
    "favoriteClothing": "Favorite clothing",
    "protagonistFear": "Protagonist's fear",
    "overcomeChallenge": "Challenge to overcome",
    "learnedSkill": "Skill learned",
    "importantObject": "Important object",
    "villainOrAntagonist": "Villain or antagonist",
    "helperOrMentor": "Helper or mentor",
    "imaginaryOrFantasyPlace": "Imaginary or fantasy place",
}


def empty_story_variables():
    return copy.deepcopy(STORY_VARIABLES_TEMPLATE)
