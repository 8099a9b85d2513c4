"""Pattern-matched, line-by-line explanations of snippets and a keyword glossary.

These are heuristics over single lines, not a parser: multi-line constructs
are explained one line at a time.
"""
import re
from dataclasses import dataclass

KEYWORD_DEFINITIONS = {
    "variable": "A container that stores data values. Can hold numbers, strings, objects, etc.",
    "function": "A reusable block of code that performs a specific task. Can accept inputs (parameters) and return outputs.",
    "object": "A collection of key-value pairs. Properties store data, methods perform actions.",
    "property": "A named piece of data belonging to an object. Accessed using dot notation (obj.property).",
    "array": "An ordered list of values. Each item has a numbered position (index) starting from 0.",
    "scope": "Determines where variables can be accessed in your code. Can be global, function, or block scope.",
    "parameter": "An input that a function accepts. Defined when creating the function.",
    "argument": "The actual value passed to a function when calling it.",
    "method": "A function that belongs to an object. Called using dot notation (obj.method()).",
    "index": "The numbered position of an item in an array. Arrays start counting from 0.",
    "reference": "When variables point to the same object in memory. Changes affect all references.",
    "declaration": "Creating a new variable using const, let, or var keywords.",
    "assignment": "Giving a value to a variable using the = operator.",
    "hoisting": "JavaScript's behavior of moving variable and function declarations to the top of their scope.",
    "closure": "When a function has access to variables from its outer scope even after the outer function finishes.",
    "callback": "A function passed as an argument to another function to be executed later.",
    "prototype": "The template object that all instances of a constructor function inherit from.",
    "this": "A keyword that refers to the object that owns the currently executing code.",
    "dom": "Document Object Model: the structure that represents HTML elements as objects JavaScript can manipulate.",
}

KEYWORD_PATTERN = re.compile(r"\b(" + "|".join(KEYWORD_DEFINITIONS) + r")\b", re.IGNORECASE)

DECLARATION = re.compile(r"^(var|let|const)\s+(\w+)\s*=\s*(.+?);?$")
REASSIGNMENT = re.compile(r"^(\w+)\s*=\s*(.+?);?$")
CONSOLE_LOG = re.compile(r"console\.log\((.+)\)")
PUSH = re.compile(r"(\w+)\.push\((.+)\)")
POP = re.compile(r"(\w+)\.pop\(\)")
PROPERTY = re.compile(r"(\w+)\.(\w+)")
IDENTIFIER = re.compile(r"[A-Za-z_$][\w$]*")


@dataclass
class BreakdownStep:
    line_number: int
    code: str
    explanation: str


def find_keywords(text: str) -> list[str]:
    """Glossary keywords mentioned in ``text``, lower-cased, in first-seen order."""
    seen = []
    for match in KEYWORD_PATTERN.finditer(text or ""):
        keyword = match.group(1).lower()
        if keyword not in seen:
            seen.append(keyword)
    return seen


def explain_line(line: str, variables: dict) -> str:
    """Explain one trimmed line, updating ``variables`` with any values it assigns."""
    match = DECLARATION.match(line)
    if match:
        _, name, value = match.groups()
        if IDENTIFIER.fullmatch(value):
            source_value = variables.get(value, value)
            explanation = (
                f"Create variable '{name}' and assign it the value of '{value}' (which is {source_value})"
            )
        else:
            explanation = f"Create variable '{name}' and assign it the value {value}"
        variables[name] = value
        return explanation
    match = REASSIGNMENT.match(line)
    if match:
        name, value = match.groups()
        old_value = variables.get(name, "undefined")
        variables[name] = value
        return f"Change variable '{name}' from {old_value} to {value}"
    if "console.log" in line:
        match = CONSOLE_LOG.search(line)
        if match:
            content = match.group(1)
            current = variables.get(content, content)
            return f"Output the current value of '{content}' to console (which is {current})"
        return f"Execute: {line}"
    if ".push(" in line:
        match = PUSH.search(line)
        if match:
            return f"Add {match.group(2)} to the end of array '{match.group(1)}'"
    elif ".pop(" in line:
        match = POP.search(line)
        if match:
            return f"Remove and return the last element from array '{match.group(1)}'"
    elif "." in line:
        match = PROPERTY.search(line)
        if match:
            return f"Access property '{match.group(2)}' of object '{match.group(1)}'"
    elif "(" in line and ")" in line:
        return f"Execute function: {line}"
    return f"Execute: {line}"


def generate_code_breakdown(code: str) -> list[BreakdownStep]:
    if not code or not isinstance(code, str):
        return []
    variables: dict[str, str] = {}
    steps = []
    for index, line in enumerate(code.strip().split("\n")):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("//"):
            continue
        steps.append(BreakdownStep(index + 1, trimmed, explain_line(trimmed, variables)))
    return steps
