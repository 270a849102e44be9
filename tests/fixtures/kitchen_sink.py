FLAG = "module"


def add(a, b):
    return a + b


class Counter:
    label = "counter"

    def __init__(self, start):
        self.value = start

    def step(self, amount):
        self.value = self.value + amount
        return self.value


def countdown(n):
    total = 0
    while n > 0:
        n = n - 1
        if n == 2:
            continue
        total = total + n
    else:
        total = total * 10
    return total


def find_first_even(limit):
    i = 1
    while i < limit:
        if i % 2 == 0:
            break
        i = i + 1
    else:
        return -1
    return i


counter = Counter(10)
counter.step(3)
counter.step(1)

print("start")
print(add(2, 3))
print((1,))
print(2 * "ab")
print(7 // 2)
print(-7 % 3)
print(1 / 4)
print(Counter)
print(counter)
print(add)

RESULT = (FLAG, add(40, 2), counter.value, countdown(5), find_first_even(9), 1 if 0 else 2)
print(RESULT)
assert RESULT == ("module", 42, 14, 80, 2, 2), "kitchen sink result changed"
