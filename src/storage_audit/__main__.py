from storage_audit.cli import app

app(prog_name="storage-audit")
