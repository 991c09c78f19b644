from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from file_converter.core.config import settings
from file_converter.schemas.conversion import FileFormat

router = APIRouter(prefix="/convert", tags=["Code Conversion"])


def _format_options(placeholder: str) -> str:
    options = [f'<option value="" disabled selected>{placeholder}</option>']
    options.extend(
        f'<option value="{fmt.extension}">{fmt.extension}</option>' for fmt in FileFormat
    )
    return "\n                ".join(options)


@router.get("/", response_class=HTMLResponse)
async def converter_page():
    """
    Serve the converter form.
    Every edit posts the fields to the validate endpoint, which decides the
    inline errors next to the touched controls and the Convert button state.
    The convert endpoint validates again on submit.
    """
    api_url = f"{settings.API_V1_STR}/convert/"
    html_content = f'''<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{settings.PROJECT_NAME}</title>
    <style>
        body {{ font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; background: #f4f6f8; }}
        .container {{ max-width: 720px; margin: 40px auto; padding: 24px; background: #fff; border-radius: 8px; }}
        .container select, .container input, .container button {{ display: block; width: 100%; margin: 8px 0; padding: 8px; }}
        .error {{ color: #c0392b; margin: 0 0 8px; font-size: 0.9rem; }}
        pre {{ background: #272822; color: #f8f8f2; padding: 12px; overflow-x: auto; }}
        .modal-overlay {{ position: fixed; inset: 0; background: rgba(0,0,0,0.5); display: none; align-items: center; justify-content: center; }}
        .modal-overlay.open {{ display: flex; }}
        .modal-content {{ background: #fff; padding: 20px; border-radius: 8px; min-width: 280px; text-align: center; }}
    </style>
</head>
<body>
    <div class="container">
        <h1>File Converter</h1>
        <form id="converter-form">
            <select id="source_format" name="source_format">
                {_format_options("Select input format")}
            </select>
            <input type="file" id="file" name="file" required>
            <p class="error" id="file_format_error"></p>
            <p class="error" id="file_required_error"></p>
            <select id="target_format" name="target_format">
                {_format_options("Select output format")}
            </select>
            <p class="error" id="same_format_error"></p>
            <input type="text" id="instructions" name="instructions" placeholder="Additional instructions" required>
            <p class="error" id="instructions_required_error"></p>
            <button type="submit" id="convert" disabled>Convert</button>
        </form>

        <div id="result" hidden>
            <h2>Converted File Content</h2>
            <pre id="converted"></pre>
            <button type="button" id="download">Download Converted File</button>
        </div>
    </div>

    <div class="modal-overlay" id="modal">
        <div class="modal-content">
            <h2>Notification</h2>
            <p id="modal-message"></p>
            <button type="button" id="modal-close">Close</button>
        </div>
    </div>

    <script>
        const form = document.getElementById('converter-form');
        const fields = {{
            source: document.getElementById('source_format'),
            target: document.getElementById('target_format'),
            file: document.getElementById('file'),
            instructions: document.getElementById('instructions'),
        }};
        const convertButton = document.getElementById('convert');
        const modal = document.getElementById('modal');
        let converted = null;

        const validateUrl = '{api_url}validate';
        const errorFields = {{
            file_format_error: ['file', 'source'],
            file_required_error: ['file'],
            same_format_error: ['source', 'target'],
            instructions_required_error: ['instructions'],
        }};
        const touched = new Set();
        let validationSeq = 0;
        let converting = false;

        function currentFile() {{
            return fields.file.files.length ? fields.file.files[0] : null;
        }}

        function showErrors(errors, onlyTouched) {{
            for (const [key, message] of Object.entries(errors)) {{
                const visible = !onlyTouched || errorFields[key].some((name) => touched.has(name));
                document.getElementById(key).textContent = visible ? message : '';
            }}
        }}

        function hideResult() {{
            converted = null;
            document.getElementById('result').hidden = true;
        }}

        function openModal(message) {{
            document.getElementById('modal-message').textContent = message;
            modal.classList.add('open');
        }}

        async function refresh() {{
            fields.file.accept = fields.source.value;
            const data = new FormData();
            data.set('source_format', fields.source.value);
            data.set('target_format', fields.target.value);
            data.set('instructions', fields.instructions.value);
            const file = currentFile();
            if (file) {{
                // only the name is validated; the content is sent on convert
                data.set('file', new Blob([]), file.name);
            }}
            const seq = ++validationSeq;
            try {{
                const response = await fetch(validateUrl, {{ method: 'POST', body: data }});
                const errors = await response.json();
                if (seq !== validationSeq) return;
                showErrors(errors, true);
                convertButton.disabled = converting || Object.values(errors).some(Boolean);
            }} catch (error) {{
                console.error('Error validating form:', error);
            }}
        }}

        for (const [name, field] of Object.entries(fields)) {{
            field.addEventListener(field === fields.instructions ? 'input' : 'change', () => {{
                touched.add(name);
                refresh();
            }});
        }}

        form.addEventListener('submit', async (event) => {{
            event.preventDefault();
            converting = true;
            convertButton.disabled = true;
            try {{
                const response = await fetch('{api_url}', {{ method: 'POST', body: new FormData(form) }});
                const body = await response.json();
                if (response.status === 422) {{
                    showErrors(body.errors, false);
                    return;
                }}
                showErrors({{ file_format_error: '', file_required_error: '', same_format_error: '', instructions_required_error: '' }}, false);
                if (!response.ok) {{
                    console.error('Error converting file:', body);
                    hideResult();
                    openModal('Error converting file. Check console for details.');
                    return;
                }}
                converted = body;
                document.getElementById('converted').textContent = body.converted_content;
                document.getElementById('result').hidden = false;
                openModal(body.message);
            }} catch (error) {{
                console.error('Error converting file:', error);
                hideResult();
                openModal('Error converting file. Check console for details.');
            }} finally {{
                converting = false;
                refresh();
            }}
        }});

        document.getElementById('download').addEventListener('click', () => {{
            const blob = new Blob([converted.converted_content], {{ type: 'text/plain' }});
            const url = URL.createObjectURL(blob);
            const a = document.createElement('a');
            a.href = url;
            a.download = converted.filename;
            document.body.appendChild(a);
            a.click();
            document.body.removeChild(a);
            URL.revokeObjectURL(url);
        }});

        modal.addEventListener('click', () => modal.classList.remove('open'));
        document.querySelector('.modal-content').addEventListener('click', (e) => e.stopPropagation());
        document.getElementById('modal-close').addEventListener('click', () => modal.classList.remove('open'));
    </script>
</body>
</html>'''
    return HTMLResponse(content=html_content)
