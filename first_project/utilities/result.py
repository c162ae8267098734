from dataclasses import dataclass, field
from typing import Any


@dataclass
class StepResult:
    """ Returns the result of a single walkthrough step. """
    action: str
    success: bool
    message: str | None = None
    value: Any = None

@dataclass
class WalkthroughReport:
    """ Collects the result of every step in the order the steps ran. """
    step_results: list[StepResult] = field(default_factory=list)

    def add(self, result: StepResult) -> StepResult:
        self.step_results.append(result)
        return result

    @property
    def success(self) -> bool:
        return all(result.success for result in self.step_results)

    def succeeded(self) -> list[StepResult]:
        return [result for result in self.step_results if result.success]

    def failed(self) -> list[StepResult]:
        return [result for result in self.step_results if not result.success]

    def get(self, action: str) -> StepResult:
        """ Return the result of the last step recorded under this action. Raises KeyError if no such step ran. """
        for result in reversed(self.step_results):
            if result.action == action:
                return result
        raise KeyError(f"No step recorded for action '{action}'.")

    def summary(self) -> str:
        return f"Walkthrough finished: {len(self.succeeded())} of {len(self.step_results)} steps succeeded"
