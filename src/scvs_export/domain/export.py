"""Export orchestrator: the four SCVS text files for a company."""

import asyncio
import io
import logging
import zipfile

from scvs_export.database.base import Database
from scvs_export.domain.entities import ExportFile, StatementType
from scvs_export.domain.errors import ValidationError
from scvs_export.domain.serializer import serialize_lines
from scvs_export.domain.statement import StatementService
from scvs_export.utils.tasks import gather_or_fail

logger = logging.getLogger(__name__)

EXPORT_ORDER = (StatementType.ESF, StatementType.ERI, StatementType.EFE, StatementType.ECP)


def archive_name(company_id: str) -> str:
    """Name of the download archive for a company."""
    return f"TXT_SCVS_{company_id}.zip"


def build_archive(files: list[ExportFile]) -> bytes:
    """Bundle export files into a single zip archive."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for export_file in files:
            archive.writestr(export_file.filename, export_file.content.encode("utf-8"))
    return buffer.getvalue()


class ExportService:
    """Builds and packages the statement files of a company."""

    def __init__(self, db: Database):
        """Initialize export service.

        Args:
            db: Database instance
        """
        self.db = db
        self.statements = StatementService(db)

    def build_file(self, company_id: str, statement_type: StatementType) -> ExportFile:
        """Build and serialize one statement file."""
        lines = self.statements.build_lines(company_id, statement_type)
        return ExportFile(
            filename=StatementType(statement_type).filename,
            content=serialize_lines(lines),
        )

    async def build_all_files_async(self, company_id: str) -> list[ExportFile]:
        """Build the four statement files concurrently.

        Each statement is computed on its own worker thread. The result is
        all four files in ESF, ERI, EFE, ECP order, or the first error raised
        by any of them; there is no partial export.

        Raises:
            ValidationError: If the company ID is empty
            DataAccessError: If any read against the store fails
        """
        company_id = _require_company_id(company_id)
        logger.info("Exporting statements for company %s", company_id)
        files = await gather_or_fail(
            *(
                asyncio.to_thread(self.build_file, company_id, statement_type)
                for statement_type in EXPORT_ORDER
            )
        )
        logger.info("Exported %d statement files for company %s", len(files), company_id)
        return files

    def build_all_files(self, company_id: str) -> list[ExportFile]:
        """Synchronous entry point for build_all_files_async."""
        return asyncio.run(self.build_all_files_async(company_id))

    def build_archive(self, company_id: str) -> tuple[str, bytes]:
        """Build the four files and bundle them for download.

        Returns:
            Tuple of (archive filename, zip bytes)
        """
        files = self.build_all_files(company_id)
        return archive_name(company_id.strip()), build_archive(files)


def _require_company_id(company_id: str) -> str:
    company_id = (company_id or "").strip()
    if not company_id:
        raise ValidationError("Company ID is required")
    return company_id
