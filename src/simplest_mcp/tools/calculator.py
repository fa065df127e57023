"""
Built-in calculator tools.
"""
from .base import tool

# Every built-in tool takes these two numeric operands
OPERANDS = ("num1", "num2")


@tool(
    name="Somar",
    description="Adds two numbers: num1 + num2.",
    descriptions={"num1": "The first number", "num2": "The second number"},
)
def somar(num1: float, num2: float) -> float:
    return num1 + num2


@tool(
    name="Subtrair",
    description="Subtracts two numbers: num1 - num2.",
    descriptions={"num1": "The minuend", "num2": "The subtrahend"},
)
def subtrair(num1: float, num2: float) -> float:
    return num1 - num2
