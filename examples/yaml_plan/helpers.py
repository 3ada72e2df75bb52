"""Functions exercised by plan.yaml."""


def add(a, b):
    return a + b


def mean(values):
    return sum(values) / len(values)


def parse_age(text):
    age = int(text)
    if age < 0:
        raise ValueError(f"age cannot be negative: {age}")
    return age


def not_ready():
    raise NotImplementedError


def is_adult(age):
    return age >= 18
