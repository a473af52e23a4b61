"""Lexicon value object — the fixed word lists used by the keyword scorer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Lexicon:
    """Immutable sentiment word lists.

    Words are matched as substrings of the lowercased text, so entries must be
    lowercase. Order is irrelevant for scoring but kept stable for reasoning
    and keyword output.
    """

    positive: tuple[str, ...]
    negative: tuple[str, ...]
    neutral: tuple[str, ...]
    intensifiers: tuple[str, ...]
    negations: tuple[str, ...]

    # Words longer than this count double in positive/negative scoring
    long_word_threshold: int = 6


DEFAULT_LEXICON = Lexicon(
    positive=(
        "love", "great", "amazing", "excellent", "fantastic", "awesome",
        "perfect", "wonderful", "outstanding", "brilliant", "incredible",
        "superb", "magnificent", "exceptional", "marvelous", "impressive",
        "remarkable", "phenomenal", "spectacular", "fabulous", "terrific",
        "splendid", "delightful", "charming", "beautiful", "stunning",
        "gorgeous", "lovely", "adorable", "recommend", "recommending",
        "highly recommend", "must have", "best", "top", "favorite",
        "thank you", "thanks", "grateful", "appreciate", "satisfied", "happy",
        "pleased", "excited", "thrilled", "overjoyed", "ecstatic", "elated",
        "cheerful", "optimistic",
    ),
    negative=(
        "hate", "terrible", "awful", "bad", "worst", "horrible",
        "disappointed", "broken", "disgusting", "pathetic", "useless",
        "worthless", "garbage", "trash", "nightmare", "disaster",
        "catastrophe", "failure", "failed", "failing", "sucks", "sucked",
        "suck", "annoying", "frustrating", "irritating", "infuriating",
        "outrageous", "ridiculous", "stupid", "dumb", "idiotic", "moronic",
        "absurd", "nonsense", "waste", "wasted", "regret", "sorry",
        "apologize", "refund", "return", "cancel", "cancelled", "quit",
        "angry", "furious", "mad", "upset", "sad", "depressed", "miserable",
        "unhappy",
    ),
    neutral=(
        "okay", "ok", "fine", "average", "normal", "standard", "typical",
        "usual", "regular", "decent", "acceptable", "adequate", "sufficient",
        "moderate", "fair", "reasonable",
    ),
    intensifiers=(
        "very", "extremely", "incredibly", "absolutely", "totally",
        "completely", "really", "so", "quite",
    ),
    negations=(
        "not", "no", "never", "nothing", "nobody", "nowhere", "neither", "nor",
        "don't", "doesn't", "didn't", "won't", "wouldn't", "can't", "cannot",
        "couldn't", "shouldn't", "mustn't",
    ),
)
