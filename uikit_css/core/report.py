"""Report builder — text and JSON output for uikit-css build results."""

import json
from typing import Any

from uikit_css.core.types import BuildReport


def format_text(report: BuildReport) -> str:
    """Format report as human-readable text."""
    lines = [f'uikit-css: {report.out_dir} (formatter: {report.formatter})', '']

    for platform_name, passes in report.outputs.items():
        lines.append(f'── {platform_name}')
        for gen_name, data in passes.items():
            if 'path' in data:
                count = data.get('variables')
                detail = f'{count} vars, ' if count is not None else ''
                lines.append(f'  {gen_name:<9} {data["path"]}  ({detail}{data.get("bytes", 0)} bytes)')
            else:
                for k, v in data.items():
                    lines.append(f'  {gen_name}.{k}: {v}')
        lines.append('')

    lines.append(f'{report.file_count} file(s) written')
    return '\n'.join(lines)


def format_json(report: BuildReport) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'out_dir': report.out_dir,
        'formatter': report.formatter,
        'platforms': [],
    }
    for platform_name, passes in report.outputs.items():
        obj['platforms'].append({'name': platform_name, 'outputs': passes})

    obj['summary'] = {'files': report.file_count}
    return json.dumps(obj, indent=2)
