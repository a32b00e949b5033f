from enum import Enum
from typing import Union


class Subject(str, Enum):
    math = "Math"
    physics = "Physics"
    chemistry = "Chemistry"


def subject_name(subject: Union[Subject, str]) -> str:
    """
    Valeur brute de la matière ("Math", ...), pour la DB et les prompts.
    """
    if isinstance(subject, Subject):
        return subject.value
    return str(subject)
