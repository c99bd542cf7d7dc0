"""Fixed catalog loaded by the reseed routine. Ids here are catalog-local."""

sets = [
    {
        "id": "1",
        "title": "Capitals",
        "description": "Capitals of the world",
        "private": False,
    },
    {
        "id": "2",
        "title": "Programming",
        "description": "Programming languages and concepts",
        "private": False,
    },
]

cards_capitals = [
    {"question": "What is the capital of France?", "answer": "Paris", "set": "1"},
    {"question": "What is the capital of Germany?", "answer": "Berlin", "set": "1"},
    {"question": "What is the capital of Italy?", "answer": "Rome", "set": "1"},
    {"question": "What is the capital of Spain?", "answer": "Madrid", "set": "1"},
    {"question": "What is the capital of Portugal?", "answer": "Lisbon", "set": "1"},
    {"question": "What is the capital of Japan?", "answer": "Tokyo", "set": "1"},
    {"question": "What is the capital of Canada?", "answer": "Ottawa", "set": "1"},
    {"question": "What is the capital of Australia?", "answer": "Canberra", "set": "1"},
    {"question": "What is the capital of Brazil?", "answer": "Brasília", "set": "1"},
    {"question": "What is the capital of Egypt?", "answer": "Cairo", "set": "1"},
]

cards_programming = [
    {"question": "What does HTML stand for?", "answer": "HyperText Markup Language", "set": "2"},
    {"question": "What does CSS stand for?", "answer": "Cascading Style Sheets", "set": "2"},
    {"question": "What does SQL stand for?", "answer": "Structured Query Language", "set": "2"},
    {"question": "Which HTTP method is used to create a resource?", "answer": "POST", "set": "2"},
    {"question": "What is the time complexity of binary search?", "answer": "O(log n)", "set": "2"},
    {"question": "Which data structure works first in, first out?", "answer": "A queue", "set": "2"},
    {"question": "What keyword defines a function in Python?", "answer": "def", "set": "2"},
    {"question": "What does JSON stand for?", "answer": "JavaScript Object Notation", "set": "2"},
]
