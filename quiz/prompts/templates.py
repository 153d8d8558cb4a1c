"""Quiz Templates - Prompts e bancos de questoes do fallback."""

# =============================================================================
# SYSTEM PROMPT
# =============================================================================

QUIZ_SYSTEM_PROMPT = """You are a quiz generator. Respond ONLY with valid JSON, no additional text."""

# =============================================================================
# PROMPT TEMPLATES
# =============================================================================

QUIZ_GENERATION_PROMPT = """Generate a {num_questions}-question multiple-choice quiz about "{topic}".

Requirements:
- Each question must have exactly {num_options} options
- Questions should be educational and factual
- Difficulty should be intermediate level
- Cover different aspects of the topic
- Avoid overly obscure or trivial questions

Format your response as a JSON object with this exact structure:
{{
  "questions": [
    {{
      "id": 1,
      "text": "Question text here?",
      "options": ["Correct answer", "Wrong option 1", "Wrong option 2", "Wrong option 3"]
    }}
  ],
  "answers": {{
    "1": "Correct answer"
  }}
}}

Important:
- The correct answer must always be the FIRST option in the options array
- Make sure all questions are related to "{topic}"
- Ensure the JSON is valid and properly formatted"""


# =============================================================================
# FALLBACK - Bancos fixos por palavra-chave
# =============================================================================
# Cada questao e (enunciado, [alternativas]); o gabarito fica em *_ANSWERS.
# A ordem dos buckets importa: o primeiro que casar vence.

PROGRAMMING_QUESTIONS: list[tuple[str, list[str]]] = [
    (
        "What does 'DOM' stand for in web development?",
        [
            "Document Object Model",
            "Data Object Management",
            "Dynamic Object Method",
            "Document Oriented Model",
        ],
    ),
    (
        "Which method is used to add an element to the end of an array in JavaScript?",
        ["push()", "append()", "add()", "insert()"],
    ),
    (
        "What is the correct way to declare a constant in JavaScript?",
        ["const myVar = 5;", "constant myVar = 5;", "let myVar = 5;", "var myVar = 5;"],
    ),
    (
        "Which of these is NOT a JavaScript data type?",
        ["float", "string", "boolean", "number"],
    ),
    (
        "What does the '===' operator do in JavaScript?",
        [
            "Strict equality comparison",
            "Assignment",
            "Loose equality comparison",
            "Not equal comparison",
        ],
    ),
]

PROGRAMMING_ANSWERS: dict[str, str] = {
    "1": "Document Object Model",
    "2": "push()",
    "3": "const myVar = 5;",
    "4": "float",
    "5": "Strict equality comparison",
}

REACT_QUESTIONS: list[tuple[str, list[str]]] = [
    (
        "What is JSX in React?",
        [
            "JavaScript XML syntax extension",
            "Java Syntax Extension",
            "JSON XML",
            "JavaScript eXtended",
        ],
    ),
    (
        "Which hook is used to manage state in functional components?",
        ["useState", "useEffect", "useContext", "useReducer"],
    ),
    (
        "What is the virtual DOM?",
        [
            "A JavaScript representation of the real DOM",
            "A new browser API",
            "A React component",
            "A CSS framework",
        ],
    ),
    (
        "How do you pass data from parent to child component?",
        ["Props", "State", "Context", "Refs"],
    ),
    (
        "What is the purpose of useEffect hook?",
        ["Handle side effects", "Manage state", "Create components", "Style components"],
    ),
]

REACT_ANSWERS: dict[str, str] = {
    "1": "JavaScript XML syntax extension",
    "2": "useState",
    "3": "A JavaScript representation of the real DOM",
    "4": "Props",
    "5": "Handle side effects",
}

# (palavras-chave, questoes, gabarito)
FALLBACK_BUCKETS: list[tuple[tuple[str, ...], list[tuple[str, list[str]]], dict[str, str]]] = [
    (("javascript", "programming"), PROGRAMMING_QUESTIONS, PROGRAMMING_ANSWERS),
    (("react",), REACT_QUESTIONS, REACT_ANSWERS),
]

# Template generico: {topic} e interpolado; a primeira alternativa e sempre a correta.
GENERIC_QUESTION_TEMPLATES: list[tuple[str, list[str]]] = [
    (
        "What is a fundamental concept in {topic}?",
        [
            "Basic principles of {topic}",
            "Advanced theories only",
            "Unrelated concepts",
            "Historical background only",
        ],
    ),
    (
        "Which approach is most effective when learning {topic}?",
        [
            "Start with fundamentals and build up",
            "Jump to advanced topics",
            "Memorize without understanding",
            "Avoid practical application",
        ],
    ),
    (
        "What makes {topic} important in its field?",
        [
            "Its practical applications and relevance",
            "Its complexity alone",
            "Its historical significance only",
            "Its theoretical nature only",
        ],
    ),
    (
        "When studying {topic}, what should be prioritized?",
        [
            "Understanding core concepts",
            "Memorizing definitions",
            "Learning advanced topics first",
            "Focusing on exceptions only",
        ],
    ),
    (
        "What is the best way to apply knowledge of {topic}?",
        [
            "Through practical exercises and real-world examples",
            "Only through theoretical study",
            "By avoiding hands-on practice",
            "Through memorization alone",
        ],
    ),
]
