"""Answer checking and learner-facing feedback messages."""

from .config import IPV4, IPV6, MAC, NONE, ADDRESS_TYPES
from .models import GeneratedAddress
from .utils import article_for

# Multiple-choice options shown to the learner
QUIZ_ANSWERS = [
    {'id': 1, 'text': 'IPv4', 'shortcut': '1'},
    {'id': 2, 'text': 'IPv6', 'shortcut': '2'},
    {'id': 3, 'text': 'MAC', 'shortcut': '3'},
    {'id': 4, 'text': 'None', 'shortcut': '4'},
]

ANSWER_TO_TYPE = {
    1: IPV4,
    2: IPV6,
    3: MAC,
    4: NONE,
}


def answer_to_type(answer) -> str:
    """Map an option number ("1"-"4" or 1-4) or a type name (any case) to an address type."""
    if isinstance(answer, int) and not isinstance(answer, bool):
        if answer in ANSWER_TO_TYPE:
            return ANSWER_TO_TYPE[answer]
    elif isinstance(answer, str):
        text = answer.strip()
        if text.isdigit() and int(text) in ANSWER_TO_TYPE:
            return ANSWER_TO_TYPE[int(text)]
        for address_type in ADDRESS_TYPES:
            if text.lower() == address_type.lower():
                return address_type
    raise ValueError(f"Not a valid answer: {answer!r}")


def is_correct_answer(answer_type: str, question: GeneratedAddress) -> bool:
    return answer_type == question.type


def build_feedback(is_correct: bool, question: GeneratedAddress) -> dict:
    """Build the {message, explanation} shown after an answer."""
    family = question.invalid_type or 'address'
    if is_correct:
        if question.is_invalid:
            message = "Correct! This is an invalid address. 🎉"
            if question.invalid_reason:
                explanation = f"This {family} {question.invalid_reason}."
            else:
                explanation = f"This is an invalid {family}."
        else:
            message = f"Correct! This is {article_for(question.type)} {question.type} address. 🎉"
            explanation = f"Great job identifying the {question.type} format!"
    else:
        message = "Incorrect. Try again! ❌"
        if question.is_invalid:
            explanation = f"This is actually an invalid {family}."
            if question.invalid_reason:
                explanation += f" It {question.invalid_reason}."
        else:
            explanation = f"This is actually {article_for(question.type)} {question.type} address."
    return {'message': message, 'explanation': explanation}
