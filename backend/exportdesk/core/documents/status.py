"""Document completion tracking.

A document's status is derived from how many of its required form
fields are filled:

    none filled  -> Missing
    some filled  -> Draft
    all filled   -> Ready

Editing fields moves a document freely among these three. ``Filed`` is
different: it is an explicit user action recorded outside this module
and passed back in on every call. Once filed, a document stays Filed
no matter what happens to its fields.
"""

from exportdesk.core.rounding import round_half_up
from exportdesk.data.document_catalog import DEFAULT_REQUIRED_FIELDS, REQUIRED_FIELDS
from exportdesk.schemas.shipment import (
    ChecklistSummary,
    DocumentStatus,
    FieldCompletionContext,
    RequiredDocument,
    Urgency,
)

COMPLETE_STATUSES = (DocumentStatus.READY, DocumentStatus.FILED)


class FinalizeBlockedError(Exception):
    def __init__(self, outstanding: list[str]):
        self.outstanding = outstanding
        super().__init__(
            f"{len(outstanding)} critical doc(s) not Ready: {', '.join(outstanding)}"
        )


class DocumentStatusTracker:
    """Compute per-document completion status from live form values."""

    @staticmethod
    def required_fields(document_id: str) -> tuple[str, ...]:
        """Field paths a document needs. Unknown ids get the minimal default set."""
        return REQUIRED_FIELDS.get(document_id, DEFAULT_REQUIRED_FIELDS)

    @staticmethod
    def is_field_filled(field_path: str, context: FieldCompletionContext) -> bool:
        if field_path == "quantity":
            return context.quantity > 0
        if field_path == "unit_price":
            return context.unit_price > 0

        section, _, key = field_path.partition(".")
        if section == "exporter":
            party = context.exporter
        elif section == "consignee":
            party = context.consignee
        else:
            return False

        value = getattr(party, key, None)
        if isinstance(value, str):
            return bool(value.strip())
        return bool(value)

    def missing_fields(self, document_id: str, context: FieldCompletionContext) -> list[str]:
        return [
            path for path in self.required_fields(document_id)
            if not self.is_field_filled(path, context)
        ]

    def compute_status(self, document_id: str, context: FieldCompletionContext) -> DocumentStatus:
        """Missing / Draft / Ready from field completeness alone."""
        required = self.required_fields(document_id)
        filled = sum(1 for path in required if self.is_field_filled(path, context))

        if filled == 0:
            return DocumentStatus.MISSING
        if filled >= len(required):
            return DocumentStatus.READY
        return DocumentStatus.DRAFT

    def resolve_status(
        self,
        document_id: str,
        context: FieldCompletionContext,
        filed: bool = False,
    ) -> DocumentStatus:
        """Computed status with the sticky Filed override applied."""
        if filed:
            return DocumentStatus.FILED
        return self.compute_status(document_id, context)

    def resolve_checklist(
        self,
        checklist: list[RequiredDocument],
        context: FieldCompletionContext,
        filed_ids: set[str] | frozenset[str] = frozenset(),
    ) -> dict[str, DocumentStatus]:
        return {
            doc.document_id: self.resolve_status(
                doc.document_id, context, doc.document_id in filed_ids
            )
            for doc in checklist
        }

    @staticmethod
    def summarize(
        checklist: list[RequiredDocument],
        statuses: dict[str, DocumentStatus],
    ) -> ChecklistSummary:
        """Progress counters and the finalize gate for a checklist.

        A checklist can be finalized once every critical document is
        Ready or Filed.
        """
        counts = {status.value: 0 for status in DocumentStatus}
        for doc in checklist:
            status = statuses.get(doc.document_id, DocumentStatus.MISSING)
            counts[status.value] += 1

        complete = counts[DocumentStatus.READY.value] + counts[DocumentStatus.FILED.value]
        total = len(checklist)
        progress = int(round_half_up(complete * 100 / total, 0)) if total else 0

        outstanding = [
            doc.abbreviation for doc in checklist
            if doc.urgency == Urgency.CRITICAL
            and statuses.get(doc.document_id, DocumentStatus.MISSING) not in COMPLETE_STATUSES
        ]

        return ChecklistSummary(
            status_counts=counts,
            complete_count=complete,
            total=total,
            progress_percent=progress,
            outstanding_critical=outstanding,
            can_finalize=not outstanding,
        )

    def finalize(
        self,
        checklist: list[RequiredDocument],
        statuses: dict[str, DocumentStatus],
        filed_ids: set[str] | frozenset[str] = frozenset(),
    ) -> set[str]:
        """File every Ready document; returns the new set of filed ids.

        Raises FinalizeBlockedError while any critical document is
        still Missing or Draft.
        """
        summary = self.summarize(checklist, statuses)
        if not summary.can_finalize:
            raise FinalizeBlockedError(summary.outstanding_critical)

        filed = set(filed_ids)
        for doc in checklist:
            if statuses.get(doc.document_id) == DocumentStatus.READY:
                filed.add(doc.document_id)
        return filed

    @staticmethod
    def newly_ready(
        previous: dict[str, DocumentStatus],
        current: dict[str, DocumentStatus],
    ) -> list[str]:
        """Document ids that just became Ready (not from Ready or Filed)."""
        return [
            doc_id for doc_id, status in current.items()
            if status == DocumentStatus.READY
            and previous.get(doc_id) not in COMPLETE_STATUSES
        ]
