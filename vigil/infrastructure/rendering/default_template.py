"""Built-in HTML notification template (Jinja2)."""

DEFAULT_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
  <head>
    <title>{{ cluster_name }}</title>
  </head>

  <body style="width:100% !important; min-width: 100%; margin:0; padding:0; font-family: 'Helvetica', 'Arial', sans-serif; color: #000000;">

    <div style="margin-left: auto; margin-right: auto; width: 36em; font-weight: bold; color: #ffffff; background-color: {% if is_critical %}#e13329{% elif is_warning %}#eebb00{% elif is_passing %}#24c75a{% endif %};">
      <div style="padding: 10px;">
        {{ cluster_name }}
      </div>
    </div>

    <div style="margin-left: auto; margin-right: auto; width: 36em; margin-top: 10px; margin-bottom: 10px;">
      <p>
        <span style="font-weight: bold; font-size: 1.05em;">System is {{ system_status }}</span>
        <br/>
        <span style="font-size: 0.9em;">The following nodes are currently experiencing issues:</span>
      </p>
      <div style="font-size: 0.85em;">
        <div style="float: left; width: 33%;">
          <strong>Failed: </strong>
          <span>{{ fail_count }}</span>
        </div>
        <div style="float: right; width: 33%;">
          <strong>Warning: </strong>
          <span>{{ warn_count }}</span>
        </div>
        <div style="display: inline-block; width: 33%;">
          <strong>Passed: </strong>
          <span>{{ pass_count }}</span>
        </div>
      </div>
    </div>

    {% for name, checks in nodes.items() %}
    <div style="margin-left: auto; margin-right: auto; width: 36em; padding-top: 5px; padding-bottom: 20px;">
      <div style="font-size: 1.1em;">
        <strong>Node: </strong>
        <strong>{{ name }}</strong>
      </div>

      {% for check in checks %}
      <div style="margin-top: 15px; padding: 10px; background-color: {% if check.is_critical %}#e13329{% elif check.is_warning %}#eebb00{% elif check.is_passing %}#24c75a{% endif %};">
        <div style="font-weight: bold; font-size: 1.1em;">
          {% if check.service %}{{ check.service }}: {% endif %}{{ check.check }}
        </div>
        <div style="font-size: 0.85em;">
          <strong>Since: </strong>
          <span>{{ check.timestamp or "" }}</span>
        </div>
        {% if check.notes %}
        <div style="padding-top: 15px;">
          <strong>Notes: </strong>
          <pre>{{ check.notes }}</pre>
        </div>
        {% endif %}
        <div style="padding-top: 15px;">
          <strong>Output:</strong>
          <pre>{{ check.output }}</pre>
        </div>
      </div>
      {% endfor %}

    </div>
    {% endfor %}

  </body>
</html>
"""
