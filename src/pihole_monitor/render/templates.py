"""Jinja2 text templates for the small, medium and large layouts."""

TEMPLATES = {
    "base.txt": """\
{{ m.title }}  [{{ badge }}]
{{ as_of }}
{{ status_line }}

{% block body %}{% endblock %}
""",
    "small.txt": """\
{% extends "base.txt" %}
{% block body %}
{{ pct }}

{{ m.blocked }}: {{ blocked }}
{{ m.total }}: {{ total }}
{% endblock %}
""",
    "medium.txt": """\
{% extends "base.txt" %}
{% block body %}
{{ pct }}

{{ m.total_queries|col }}{{ m.queries_blocked }}
{{ total|col }}{{ blocked }}

{{ m.domains_on_list }}: {{ domains_on_list }}
{% endblock %}
""",
    "large.txt": """\
{% extends "base.txt" %}
{% block body %}
{{ pct }}
{{ m.blocking_rate }}

{{ m.total_queries|col }}{{ m.queries_blocked }}
{{ total|col }}{{ blocked }}

{{ m.forwarded|col }}{{ m.cached }}
{{ forwarded|col }}{{ cached }}

{{ m.clients|col }}{{ m.unique_domains }}
{{ clients|col }}{{ unique_domains }}

{{ m.domains_on_list }}: {{ domains_on_list }}

{{ footer }}
{{ next_refresh }}
{% endblock %}
""",
}
