"""Static topic knowledge base for the local responder.

Topics are matched by plain substring containment against the lower-cased
message, first hit in insertion order wins. Short topics such as ``ai`` match
inside longer words; the table order keeps the programming topics ahead of it.
"""

KNOWLEDGE_BASE: dict[str, str] = {
    # Programming topics
    "javascript": (
        "JavaScript is a versatile programming language primarily used for web development. "
        "It's essential for creating interactive websites and can also be used for "
        "server-side development with Node.js."
    ),
    "react": (
        "React is a popular JavaScript library for building user interfaces, especially "
        "single-page applications. It uses a component-based architecture and virtual DOM "
        "for efficient rendering."
    ),
    "python": (
        "Python is a high-level, interpreted programming language known for its simplicity "
        "and readability. It's widely used in web development, data science, AI, and automation."
    ),
    "html": (
        "HTML (HyperText Markup Language) is the standard markup language for creating web "
        "pages. It provides the basic structure and content of websites."
    ),
    "css": (
        "CSS (Cascading Style Sheets) is used for styling and laying out web pages. "
        "It controls the visual presentation of HTML elements."
    ),
    # General topics
    "ai": (
        "Artificial Intelligence (AI) refers to the simulation of human intelligence in "
        "machines. It includes machine learning, natural language processing, and computer vision."
    ),
    "technology": (
        "Technology encompasses the application of scientific knowledge for practical "
        "purposes, including computers, software, and digital systems that enhance human "
        "capabilities."
    ),
    "science": (
        "Science is a systematic approach to understanding the natural world through "
        "observation, experimentation, and analysis. It encompasses physics, chemistry, "
        "biology, and many other fields."
    ),
}

TOPICS: tuple[str, ...] = tuple(KNOWLEDGE_BASE)


def lookup(message: str) -> str | None:
    """Return the explanation for the first topic contained in *message*, else None."""
    text = (message or "").lower()
    for topic, info in KNOWLEDGE_BASE.items():
        if topic in text:
            return info
    return None
