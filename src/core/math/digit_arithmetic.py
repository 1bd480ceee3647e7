"""
Digit Arithmetic — Magnitude Primitives

Модуль реализует беззнаковую (sign-agnostic) арифметику над величинами,
представленными списком десятичных цифр в порядке от младшей к старшей
(least-significant first):

    1234  →  [4, 3, 2, 1]

Содержит:
- Нормализацию (удаление старших нулей)
- Конверсию int/str ↔ список цифр
- Сравнение величин
- Сложение с переносом, вычитание с заёмом
- Школьное умножение O(n·m)
- Деление столбиком с бинарным поиском цифры частного

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Список цифр никогда не пустой; ноль — это [0]
2. Нет старших нулей, кроме самого нуля
3. Каждая цифра в диапазоне 0..9
4. Функции не мутируют входные списки (кроме trim_leading_zeros)
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание системы счисления (только десятичное представление)
BASE: Final[int] = 10

# Максимальное значение одной цифры
MAX_DIGIT: Final[int] = BASE - 1

# Допустимые символы числовой части строки (только ASCII)
DECIMAL_DIGITS: Final[str] = "0123456789"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigNumberError(Exception):
    """Базовый класс ошибок арифметики больших чисел."""

    pass


class ParseError(BigNumberError, ValueError):
    """
    Невалидная десятичная строка.

    Возникает, если числовая часть содержит символ вне 0-9
    или если после знака нет ни одной цифры.
    """

    pass


class DivisionByZeroError(BigNumberError, ZeroDivisionError):
    """
    Деление на ноль.

    Делитель равен нулю в /, %, divide или модульной операции.
    Результат-заглушка (0, 0) никогда не возвращается.
    """

    pass


class NoInverseError(BigNumberError, ValueError):
    """Обратный элемент не существует: gcd(a, m) != 1."""

    pass


class InvalidModulusError(BigNumberError, ValueError):
    """Модуль должен быть положительным (m >= 1)."""

    pass


# =============================================================================
# НОРМАЛИЗАЦИЯ И КОНВЕРСИЯ
# =============================================================================


def trim_leading_zeros(digits: list[int]) -> list[int]:
    """
    Удаление старших нулей (in-place).

    Старшие цифры находятся в конце списка. Минимум одна цифра сохраняется.
    Пустой список превращается в [0].

    Args:
        digits: Цифры, младшая первой

    Returns:
        Тот же список после нормализации

    Examples:
        >>> trim_leading_zeros([3, 0, 0])
        [3]
        >>> trim_leading_zeros([0, 0])
        [0]
    """
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    if not digits:
        digits.append(0)
    return digits


def is_zero_magnitude(digits: list[int] | tuple[int, ...]) -> bool:
    """Величина равна нулю (нормализованное представление [0])."""
    return len(digits) == 1 and digits[0] == 0


def digits_from_int(value: int) -> tuple[list[int], bool]:
    """
    Разложение int на десятичные цифры.

    Args:
        value: Любое целое (без ограничения разрядности)

    Returns:
        (digits, negative): цифры модуля, младшая первой; флаг знака.
        Для нуля: ([0], False)

    Examples:
        >>> digits_from_int(-120)
        ([0, 2, 1], True)
    """
    if value == 0:
        return [0], False

    negative = value < 0
    value = abs(value)

    digits: list[int] = []
    while value > 0:
        value, digit = divmod(value, BASE)
        digits.append(digit)

    return digits, negative


def parse_decimal(text: str) -> tuple[list[int], bool]:
    """
    Разбор десятичной строки с необязательным знаком.

    Правила:
    - Ведущий '+' или '-' задаёт знак (по умолчанию неотрицательный)
    - Остальные символы обязаны быть ASCII-цифрами
    - Пустая строка → ноль
    - Пробелы не удаляются (вызывающая сторона очищает ввод сама)
    - "-0", "000" нормализуются в неотрицательный ноль

    Args:
        text: Десятичная строка

    Returns:
        (digits, negative) в нормализованном виде

    Raises:
        ParseError: Недопустимый символ или знак без цифр

    Examples:
        >>> parse_decimal("-0042")
        ([2, 4], True)
        >>> parse_decimal("")
        ([0], False)
    """
    if text == "":
        return [0], False

    negative = False
    start = 0
    if text[0] == "-":
        negative = True
        start = 1
    elif text[0] == "+":
        start = 1

    if start == len(text):
        raise ParseError(f"No digits after sign in {text!r}")

    digits: list[int] = []
    # Читаем справа налево: младшая цифра первой
    for position in range(len(text) - 1, start - 1, -1):
        char = text[position]
        if char not in DECIMAL_DIGITS:
            raise ParseError(
                f"Invalid character {char!r} at position {position} in {text!r}"
            )
        digits.append(ord(char) - ord("0"))

    trim_leading_zeros(digits)
    if is_zero_magnitude(digits):
        negative = False

    return digits, negative


def format_decimal(digits: list[int] | tuple[int, ...], negative: bool) -> str:
    """
    Каноническая десятичная запись.

    Без старших нулей; '-' только для ненулевого отрицательного значения.

    Args:
        digits: Нормализованные цифры, младшая первой
        negative: Флаг знака

    Returns:
        Строка вида "0", "42", "-17"
    """
    if is_zero_magnitude(digits):
        return "0"

    body = "".join(DECIMAL_DIGITS[d] for d in reversed(digits))
    return "-" + body if negative else body


# =============================================================================
# СРАВНЕНИЕ ВЕЛИЧИН
# =============================================================================


def compare_magnitudes(
    a: list[int] | tuple[int, ...],
    b: list[int] | tuple[int, ...],
) -> int:
    """
    Сравнение модулей двух нормализованных величин.

    Алгоритм:
    1. Более длинная величина больше
    2. При равной длине решает первая различающаяся цифра, начиная со старшей

    Returns:
        -1 если |a| < |b|
         0 если |a| == |b|
        +1 если |a| > |b|
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1

    return 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(
    a: list[int] | tuple[int, ...],
    b: list[int] | tuple[int, ...],
) -> list[int]:
    """
    Сложение модулей с распространением переноса.

    Проход идёт по длине большего операнда и продолжается,
    пока остаётся перенос.

    Returns:
        Нормализованные цифры |a| + |b|

    Examples:
        >>> add_magnitudes([9, 9], [1])
        [0, 0, 1]
    """
    result: list[int] = []
    carry = 0
    max_size = max(len(a), len(b))

    i = 0
    while i < max_size or carry:
        digit_sum = carry
        if i < len(a):
            digit_sum += a[i]
        if i < len(b):
            digit_sum += b[i]
        result.append(digit_sum % BASE)
        carry = digit_sum // BASE
        i += 1

    return trim_leading_zeros(result)


def subtract_magnitudes(
    a: list[int] | tuple[int, ...],
    b: list[int] | tuple[int, ...],
) -> list[int]:
    """
    Вычитание модулей с заёмом: |a| - |b|.

    ПРЕДУСЛОВИЕ: |a| >= |b|. Вызывающая сторона упорядочивает операнды
    по модулю заранее; нарушение предусловия не даёт неверный результат,
    а приводит к ValueError.

    Args:
        a: Уменьшаемое (больший модуль)
        b: Вычитаемое (меньший или равный модуль)

    Returns:
        Нормализованные цифры |a| - |b|

    Raises:
        ValueError: Если |a| < |b|

    Examples:
        >>> subtract_magnitudes([0, 0, 1], [1])
        [9, 9]
    """
    if compare_magnitudes(a, b) < 0:
        raise ValueError(
            f"subtract_magnitudes requires |a| >= |b|, "
            f"got len(a)={len(a)}, len(b)={len(b)}"
        )

    result: list[int] = []
    borrow = 0

    for i in range(len(a)):
        digit_diff = a[i] - borrow
        if i < len(b):
            digit_diff -= b[i]

        if digit_diff < 0:
            digit_diff += BASE
            borrow = 1
        else:
            borrow = 0

        result.append(digit_diff)

    return trim_leading_zeros(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_magnitudes(
    a: list[int] | tuple[int, ...],
    b: list[int] | tuple[int, ...],
) -> list[int]:
    """
    Школьное умножение модулей, O(n·m).

    Для каждой пары позиций (i, j) произведение a[i] * b[j] добавляется
    в позицию i + j результата. Перенос распространяется сразу
    (не откладывается до финального прохода). Буфер заранее имеет
    размер len(a) + len(b), но может быть расширен циклом переноса.

    Returns:
        Нормализованные цифры |a| * |b|

    Examples:
        >>> multiply_magnitudes([2, 1], [2, 1])  # 12 * 12
        [4, 4, 1]
    """
    result = [0] * (len(a) + len(b))

    for i, a_digit in enumerate(a):
        if a_digit == 0:
            continue
        for j, b_digit in enumerate(b):
            product = a_digit * b_digit
            position = i + j
            while product > 0:
                if position == len(result):
                    result.append(0)
                product += result[position]
                result[position] = product % BASE
                product //= BASE
                position += 1

    return trim_leading_zeros(result)


def multiply_by_digit(a: list[int] | tuple[int, ...], digit: int) -> list[int]:
    """
    Умножение модуля на одну цифру 0..9.

    Args:
        a: Цифры модуля
        digit: Множитель (0..9)

    Returns:
        Нормализованные цифры |a| * digit

    Raises:
        ValueError: Если digit вне диапазона 0..9
    """
    if not 0 <= digit <= MAX_DIGIT:
        raise ValueError(f"digit must be in 0..{MAX_DIGIT}, got {digit}")

    if digit == 0:
        return [0]

    result: list[int] = []
    carry = 0
    for a_digit in a:
        product = a_digit * digit + carry
        result.append(product % BASE)
        carry = product // BASE
    while carry:
        result.append(carry % BASE)
        carry //= BASE

    return trim_leading_zeros(result)


# =============================================================================
# ДЕЛЕНИЕ СТОЛБИКОМ
# =============================================================================


def divmod_magnitudes(
    dividend: list[int] | tuple[int, ...],
    divisor: list[int] | tuple[int, ...],
) -> tuple[list[int], list[int]]:
    """
    Деление модулей столбиком: (|dividend| // |divisor|, |dividend| % |divisor|).

    Алгоритм (от старшей цифры делимого к младшей):
    1. Текущий остаток изначально равен нулю
    2. Очередная цифра делимого приписывается к остатку как младшая
    3. Бинарным поиском по 0..9 находится наибольшая цифра q,
       такая что |divisor| * q <= остаток
    4. q приписывается к частному, |divisor| * q вычитается из остатка

    Кратные делителя (|divisor| * 0..9) вычисляются один раз на вызов.

    Args:
        dividend: Цифры делимого
        divisor: Цифры делителя

    Returns:
        (quotient_digits, remainder_digits), оба нормализованы;
        остаток строго меньше делителя

    Raises:
        DivisionByZeroError: Если делитель равен нулю
    """
    if is_zero_magnitude(divisor):
        raise DivisionByZeroError("Division by zero")

    multiples = [multiply_by_digit(divisor, k) for k in range(BASE)]

    quotient_msd_first: list[int] = []
    remainder: list[int] = [0]

    for i in range(len(dividend) - 1, -1, -1):
        # Сдвиг остатка на один разряд и приписывание цифры делимого
        remainder.insert(0, dividend[i])
        trim_leading_zeros(remainder)

        quotient_digit = 0
        left, right = 0, MAX_DIGIT
        while left <= right:
            mid = (left + right) // 2
            if compare_magnitudes(multiples[mid], remainder) <= 0:
                quotient_digit = mid
                left = mid + 1
            else:
                right = mid - 1

        if quotient_digit:
            remainder = subtract_magnitudes(remainder, multiples[quotient_digit])
        quotient_msd_first.append(quotient_digit)

    quotient = quotient_msd_first[::-1]
    return trim_leading_zeros(quotient), remainder
