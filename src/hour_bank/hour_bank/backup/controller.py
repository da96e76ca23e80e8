from __future__ import annotations

import io
import zipfile
from datetime import date

from flask import Flask, send_file

from ..common.web import admin_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/backup", endpoint="backup_download")
    @admin_required
    def backup_download():
        today = date.today()
        files = container.backup_service.build(today=today)

        buf = io.BytesIO()
        with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
            for f in files:
                zf.writestr(f.filename, f.content.encode("utf-8-sig"))
        buf.seek(0)

        return send_file(
            buf,
            mimetype="application/zip",
            as_attachment=True,
            download_name=f"backup_{today.isoformat()}.zip",
        )
