"""Batch labeling of open issues and pull requests."""

import logging
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from .github_client.models import GitHubItem
from .labels.mapping import find_missing_labels
from .labels.reconciler import reconcile_labels

logger = logging.getLogger(__name__)

ITEM_DELAY_SECONDS = 0.5


class ItemOutcome(str, Enum):
    """Terminal state of a single item."""

    SKIPPED = "skipped"
    LABELS_APPLIED = "labels-applied"
    NO_OP = "no-op"
    ERRORED = "errored"


class RepositoryClient(Protocol):
    def fetch_open_issues(self, org: str, repo: str, limit: int) -> list[GitHubItem]: ...

    def fetch_available_labels(self, org: str, repo: str) -> set[str]: ...

    def add_labels(
        self, org: str, repo: str, issue_number: int, labels: set[str]
    ) -> None: ...


class ItemClassifier(Protocol):
    def classify(self, content: str) -> list[str]: ...


@dataclass
class RunSummary:
    """Counters reported at the end of a run."""

    processed: int = 0
    labeled: int = 0
    outcomes: dict[int, ItemOutcome] = field(default_factory=dict)
    applied: dict[int, set[str]] = field(default_factory=dict)

    @property
    def skipped(self) -> int:
        return self._count(ItemOutcome.SKIPPED)

    @property
    def errored(self) -> int:
        return self._count(ItemOutcome.ERRORED)

    def _count(self, outcome: ItemOutcome) -> int:
        return sum(1 for value in self.outcomes.values() if value == outcome)


class BatchLabeler:
    """Classify unlabeled items one at a time and apply mapped labels."""

    def __init__(
        self,
        github: RepositoryClient,
        classifier: ItemClassifier,
        label_mapping: Mapping[str, str],
        delay: float = ITEM_DELAY_SECONDS,
        dry_run: bool = False,
        log: logging.Logger | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize the labeler.

        Args:
            github: Repository data collaborator
            classifier: Classifier chosen for the run
            label_mapping: Category to label name mapping
            delay: Seconds to pause after each item
            dry_run: Log planned labels instead of applying them
            log: Logger for progress and warnings
            sleep: Blocking pause used between items
        """
        self.github = github
        self.classifier = classifier
        self.label_mapping = dict(label_mapping)
        self.delay = delay
        self.dry_run = dry_run
        self.log = log or logger
        self.sleep = sleep

    def run(self, org: str, repo: str, max_items: int) -> RunSummary:
        """Process up to ``max_items`` open issues and pull requests.

        Failures while listing issues or labels propagate; failures for a
        single item are logged and the run moves on to the next item.
        """
        self.log.info("Starting to process issues and PRs for %s/%s", org, repo)

        items = self.github.fetch_open_issues(org, repo, max_items)
        available = self.github.fetch_available_labels(org, repo)

        for category, label in find_missing_labels(
            self.label_mapping, available
        ).items():
            self.log.warning(
                'Label "%s" mapped from category "%s" does not exist in the repository',
                label,
                category,
            )

        summary = RunSummary()
        for item in items:
            summary.processed += 1
            try:
                outcome = self._process_item(org, repo, item, available, summary)
            except Exception as e:
                self.log.warning(
                    "Error processing %s #%d: %s", item.kind.value, item.number, e
                )
                outcome = ItemOutcome.ERRORED
            summary.outcomes[item.number] = outcome
            if outcome == ItemOutcome.LABELS_APPLIED:
                summary.labeled += 1

            self.sleep(self.delay)

        self.log.info(
            "Processing complete. Processed %d items, labeled %d items.",
            summary.processed,
            summary.labeled,
        )
        return summary

    def _process_item(
        self,
        org: str,
        repo: str,
        item: GitHubItem,
        available: set[str],
        summary: RunSummary,
    ) -> ItemOutcome:
        kind = item.kind.value
        self.log.info("Processing %s #%d: %s", kind, item.number, item.title)

        if item.is_labeled:
            self.log.info("%s #%d already has labels. Skipping.", kind, item.number)
            return ItemOutcome.SKIPPED

        categories = self.classifier.classify(item.content())
        if not categories:
            self.log.info("No categories detected for %s #%d", kind, item.number)
            return ItemOutcome.NO_OP

        self.log.info(
            "Detected categories for %s #%d: %s",
            kind,
            item.number,
            ", ".join(categories),
        )

        labels = reconcile_labels(categories, self.label_mapping, available)
        if not labels:
            self.log.info("No matching labels found for %s #%d", kind, item.number)
            return ItemOutcome.NO_OP

        label_list = ", ".join(sorted(labels))
        if self.dry_run:
            self.log.info(
                "[dry-run] Would apply labels: %s to %s #%d",
                label_list,
                kind,
                item.number,
            )
        else:
            self.github.add_labels(org, repo, item.number, labels)
            self.log.info(
                "Applied labels: %s to %s #%d", label_list, kind, item.number
            )

        summary.applied[item.number] = labels
        return ItemOutcome.LABELS_APPLIED
