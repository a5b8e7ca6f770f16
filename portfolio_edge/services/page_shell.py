# File: portfolio_edge/services/page_shell.py

"""
The single HTML page. Cards are rendered in the browser from /api/projects.
"""

import html

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <link rel="stylesheet" href="/styles.css">
</head>
<body>
    <div id="projects" class="projects">Loading...</div>

    <script>
        function esc(value) {{
            return String(value)
                .replace(/&/g, '&amp;')
                .replace(/</g, '&lt;')
                .replace(/>/g, '&gt;')
                .replace(/"/g, '&quot;');
        }}

        function imageBlock(key, name) {{
            return `<img src="/images/${{encodeURI(key)}}" alt="${{esc(name)}}">`;
        }}

        async function loadProjects() {{
            const response = await fetch('/api/projects');
            const projects = await response.json();
            const projectsContainer = document.getElementById('projects');

            if (projects.length === 0) {{
                projectsContainer.innerHTML = '<p>No projects found.</p>';
                return;
            }}

            projectsContainer.innerHTML = projects.map(project => `
                <div class="project">
                    ${{project.imageKey ? imageBlock(project.imageKey, project.name) : ''}}
                    ${{project.tags ? `<div class="tags">${{project.tags.map(tag => `<span class="tag">${{esc(tag)}}</span>`).join('')}}</div>` : ''}}
                    <h2>${{esc(project.name)}}</h2>
                    <p>${{esc(project.description)}}</p>
                    ${{project.image ? imageBlock(project.image, project.name) : ''}}
                </div>
            `).join('');
        }}

        loadProjects();
    </script>
</body>
</html>
"""


def render_shell(title: str = "My Portfolio") -> str:
    return PAGE_TEMPLATE.format(title=html.escape(title))
