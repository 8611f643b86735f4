from shallot.evaluation.evaluator import evaluate, is_truthy

__all__ = ["evaluate", "is_truthy"]
