from .scoring import (Outcome, Feedback, InvalidWordError, InvalidFeedbackError,
                      score, score_pattern, canonical_key, matches)
from .constraints import filter_candidates
from .validation import validate_guess, word_problem
from .keyboard import letter_states, merge_letter_state
from .entropy import (EntropyRanker, RankedSuggestion, partition, partition_sizes,
                      entropy, entropy_from_counts, rank)

__all__ = [
    "Outcome", "Feedback", "InvalidWordError", "InvalidFeedbackError",
    "score", "score_pattern", "canonical_key", "matches",
    "filter_candidates", "validate_guess", "word_problem",
    "letter_states", "merge_letter_state",
    "EntropyRanker", "RankedSuggestion", "partition", "partition_sizes",
    "entropy", "entropy_from_counts", "rank",
]
