"""
Selection policy for choosing one split among all enumerated candidates.
"""

from collections.abc import Iterable

from domain.models.candidate_split import CandidateSplit, Selection


class SplitSelector:
    """
    Cutoff-and-tie-break selection.

    If more than one candidate scores strictly below the cutoff, the one with
    the lowest repeat score among them wins. Otherwise the candidate with the
    lowest parity score overall wins. Ties keep the first-encountered
    candidate.
    """

    def __init__(self, score_cutoff: float = 100.0):
        self.score_cutoff = score_cutoff

    def select(self, candidates: Iterable[CandidateSplit]) -> Selection | None:
        """
        Choose the winning candidate in a single pass.

        Works on a lazy stream: tracks the best score overall and the best
        repeat score among candidates under the cutoff instead of collecting
        them.

        Returns:
            Selection, or None if there were no candidates
        """
        best_by_score: CandidateSplit | None = None
        best_by_repeat: CandidateSplit | None = None
        evaluated = 0
        below_cutoff = 0

        for candidate in candidates:
            evaluated += 1
            if best_by_score is None or candidate.score < best_by_score.score:
                best_by_score = candidate
            if candidate.score < self.score_cutoff:
                below_cutoff += 1
                if best_by_repeat is None or candidate.repeat_score < best_by_repeat.repeat_score:
                    best_by_repeat = candidate

        if best_by_score is None:
            return None

        use_repeat = below_cutoff > 1
        return Selection(
            winner=best_by_repeat if use_repeat else best_by_score,
            evaluated=evaluated,
            below_cutoff=below_cutoff,
            used_repeat_tiebreak=use_repeat,
        )
