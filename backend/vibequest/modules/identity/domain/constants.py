"""
Identity Domain Constants

Password policy messages and the common-password denylist.
"""


class PasswordPolicyMessages:
    """User-facing messages for failed password checks."""
    NO_WHITESPACE = "Password cannot contain spaces"
    MIN_LENGTH = "Password must be at least {min_length} characters"
    HAS_UPPERCASE = "Password must contain at least one uppercase letter"
    HAS_LOWERCASE = "Password must contain at least one lowercase letter"
    HAS_NUMBER = "Password must contain at least one number"
    HAS_SYMBOL = "Password must contain at least one special character (!@#$%^&*)"
    NOT_COMMON = "This password is too common"
    CONTAINS_EMAIL = "Password cannot contain your email"
    CONTAINS_NAME = "Password cannot contain your name"
    NOT_STRONG_ENOUGH = "Password is not strong enough"


class PasswordRequirementLabels:
    """Checklist labels shown next to the password field."""
    MIN_LENGTH = "At least {min_length} characters"
    HAS_UPPERCASE = "Uppercase letter (A-Z)"
    HAS_LOWERCASE = "Lowercase letter (a-z)"
    HAS_NUMBER = "Number (0-9)"
    HAS_SYMBOL = "Symbol (!@#$%^&*)"
    NOT_COMMON = "Not a common password"
    STRONG_ENOUGH = "Strong enough (strength score ≥ {min_score})"
    NO_WHITESPACE = "No spaces"
    NOT_USER_INFO = "Doesn't contain your email or name"


class QuickStrengthHints:
    """Hints produced by the composition-only strength evaluation."""
    MIN_LENGTH = "Use at least {min_length} characters"
    HAS_UPPERCASE = "Add an uppercase letter"
    HAS_LOWERCASE = "Add a lowercase letter"
    HAS_NUMBER = "Add a number"
    HAS_SYMBOL = "Add a special character (!@#$%^&*)"
    STRONG = "Strong password!"
    BONUS_LENGTH = 16
    MAX_SCORE = 5


# Exact-match denylist, compared against the lowercased trimmed password.
COMMON_PASSWORDS: frozenset[str] = frozenset({
    "password", "password1", "password12", "password123", "password1234",
    "password12345", "password123!", "password!", "passw0rd", "p@ssw0rd",
    "p@ssword", "p@ssw0rd123", "p@ssw0rd123!", "pa$$w0rd", "passwordpassword",
    "123456", "1234567", "12345678", "123456789", "1234567890",
    "12345678910", "123123", "123123123", "111111", "000000",
    "11111111", "123321", "654321", "666666", "121212",
    "112233", "987654321", "qwerty", "qwerty1", "qwerty12",
    "qwerty123", "qwerty123!", "qwertyuiop", "qwertyuiop1", "qwerty12345",
    "asdfgh", "asdfghjkl", "zxcvbn", "zxcvbnm", "qazwsx",
    "1qaz2wsx", "1q2w3e4r", "1q2w3e4r5t", "1qaz2wsx3edc", "abc123",
    "abcd1234", "abc12345", "abcdef", "abcdefg", "abcdefgh",
    "iloveyou", "iloveyou1", "iloveyou!", "letmein", "letmein1",
    "letmein123", "welcome", "welcome1", "welcome123", "welcome123!",
    "admin", "admin1", "admin123", "admin1234", "administrator",
    "root", "toor", "login", "guest", "test",
    "test123", "test1234", "changeme", "changeme123", "default",
    "secret", "secret123", "master", "monkey", "dragon",
    "shadow", "sunshine", "princess", "football", "baseball",
    "superman", "batman", "trustno1", "starwars", "whatever",
    "freedom", "hello123", "michael", "jennifer", "jordan23",
    "mustang", "harley", "ranger", "killer", "pepper",
    "summer", "summer2024", "summer2025", "winter", "winter2024",
    "spring", "autumn", "monday", "charlie", "donald",
    "flower", "lovely", "loveme", "hottie", "cookie",
    "chocolate", "blink182", "solo", "ninja", "azerty",
    "google", "computer", "internet", "samsung", "pokemon",
    "minecraft", "fortnite", "liverpool", "chelsea", "arsenal",
    "happiness", "happy123", "mentalhealth", "wellness", "wellness123",
    "mindfulness", "selfcare", "vibequest", "vibequest123", "dailyvibe",
})
