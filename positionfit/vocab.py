"""
Fixed vocabularies shared by profiles and position slots.
Personality tags are the four animal archetypes; role types are the
specialist job families a slot can recruit for.
"""
PERSONALITY_TAGS = {
    "horse": {"name": "Horse", "title": "Lead / Drive",
              "keywords": ["leadership", "drive", "decisiveness"]},
    "dog": {"name": "Dog", "title": "Quality / Risk",
            "keywords": ["trust", "responsibility", "detail"]},
    "cat": {"name": "Cat", "title": "Design / Creativity",
            "keywords": ["creativity", "intuition", "innovation"]},
    "rooster": {"name": "Rooster", "title": "Execution / Speed",
                "keywords": ["execution", "speed", "efficiency"]},
}

ROLE_TYPES = {
    "backend": "Backend",
    "frontend": "Frontend",
    "design": "Design",
    "pm": "PM",
    "data": "Data",
    "qa": "QA",
    "devops": "DevOps",
    "marketing": "Marketing",
    "mobile": "Mobile",
    "security": "Security",
}


def normalize_tag(value):
    # blank means "no tag"; unknown labels are kept so they only match themselves
    if value is None:
        return None
    tag = str(value).strip().lower()
    return tag or None


def normalize_role_type(value):
    if value is None:
        return None
    rt = str(value).strip().lower()
    return rt if rt in ROLE_TYPES else None


def role_label(role, role_type=None):
    """Display label for a slot: role type name first, then the personality role."""
    if role_type in ROLE_TYPES:
        return ROLE_TYPES[role_type]
    if role in PERSONALITY_TAGS:
        return PERSONALITY_TAGS[role]["name"]
    return str(role)
