"""HTML documents wrapping rendered cards for the browser and the Qt shell.

Architecture note:
    Cards are built server-side and every answer is graded by the server,
    which sends the updated card back. The page only forwards clicks and
    runs highlight.js / MathJax over nodes the server marked as pending, so
    the Qt view and a plain browser tab behave the same way.
"""

from __future__ import annotations

import html
import json
from dataclasses import dataclass

from selfquiz_app.constants.about import APP_NAME
from selfquiz_app.constants.ui_constants import (
    DEFAULT_LEVEL,
    EMPTY_KNOWLEDGE_LIST_ITEM,
    LEVELS,
    LOAD_FAILED_MESSAGE,
    RESULTS_CONTAINER_ID,
)
from selfquiz_app.styling.styles import Styles

_MATHJAX_SCRIPT = "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"
_HIGHLIGHT_SCRIPT = "https://cdn.jsdelivr.net/gh/highlightjs/cdn-release@11.9.0/build/highlight.min.js"
_HIGHLIGHT_STYLE = "https://cdn.jsdelivr.net/gh/highlightjs/cdn-release@11.9.0/build/styles/github.min.css"

_CARD_SCRIPT = """
      function typesetPending(root) {
        if (window.hljs) {
          root.querySelectorAll('code[data-highlight="pending"]').forEach(block => {
            hljs.highlightElement(block);
            block.dataset.highlight = 'done';
          });
        }
        const pending = Array.from(root.querySelectorAll('[data-typeset="pending"]'));
        if (root.matches && root.matches('[data-typeset="pending"]')) {
          pending.push(root);
        }
        pending.forEach(node => { node.dataset.typeset = 'done'; });
        const targets = pending.filter(node => !pending.some(other => other !== node && other.contains(node)));
        if (targets.length === 0) return;
        if (window.MathJax && window.MathJax.typesetPromise) {
          window.MathJax.typesetPromise(targets).catch(err => {
            console.error('MathJax typesetting failed:', err);
          });
        } else {
          console.warn('MathJax not loaded; formulas stay unrendered');
        }
      }

      function replaceWithMarkup(element, markup) {
        const template = document.createElement('template');
        template.innerHTML = markup.trim();
        const fresh = template.content.firstElementChild;
        element.replaceWith(fresh);
        return fresh;
      }

      document.addEventListener('click', async event => {
        const option = event.target.closest('ul.options > li');
        if (!option) return;
        const list = option.closest('ul.options');
        if (list.style.pointerEvents === 'none') return;
        const card = option.closest('.question-card');
        const payload = {
          card_id: card.id,
          option: option.dataset.option,
          sub_id: option.dataset.subid !== undefined ? Number(option.dataset.subid) : null
        };
        try {
          const response = await fetch('/api/answer', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify(payload)
          });
          if (!response.ok) {
            console.error('Answer rejected:', response.status);
            return;
          }
          const body = await response.json();
          typesetPending(replaceWithMarkup(card, body.card_html));
        } catch (err) {
          console.error('Error submitting answer:', err);
        }
      });

      window.addEventListener('load', () => {
        const container = document.getElementById(window.SELFQUIZ.containerId);
        if (container) typesetPending(container);
      });
"""

_NAVIGATION_SCRIPT = """
      const config = window.SELFQUIZ;
      const knowledgeList = document.getElementById('knowledge-list');
      let currentLevel = config.defaultLevel;
      let currentKnowledge = null;
      let renderToken = 0;

      function showPlaceholder(message) {
        const container = document.getElementById(config.containerId);
        container.innerHTML = '';
        const div = document.createElement('div');
        div.classList.add('placeholder');
        div.textContent = message;
        container.appendChild(div);
      }

      async function loadCards(level, knowledgePoint) {
        const token = ++renderToken;
        const url = `/api/levels/${encodeURIComponent(level)}/knowledge-points/${encodeURIComponent(knowledgePoint)}/cards`;
        try {
          const response = await fetch(url);
          if (!response.ok) throw new Error(`HTTP ${response.status}`);
          const markup = await response.text();
          if (token !== renderToken) return;
          const container = document.getElementById(config.containerId);
          typesetPending(replaceWithMarkup(container, markup));
        } catch (err) {
          console.error(err);
          if (token === renderToken) showPlaceholder(config.loadFailedMessage);
        }
      }

      async function loadLevel(level) {
        const token = ++renderToken;
        knowledgeList.innerHTML = '';
        currentKnowledge = null;
        let body;
        try {
          const response = await fetch(`/api/levels/${encodeURIComponent(level)}`);
          if (!response.ok) throw new Error(`HTTP ${response.status}`);
          body = await response.json();
        } catch (err) {
          console.error(err);
          if (token === renderToken) showPlaceholder(config.loadFailedMessage);
          return;
        }
        if (token !== renderToken) return;
        if (body.knowledge_points.length === 0) {
          const li = document.createElement('li');
          li.textContent = config.emptyKnowledgeItem;
          knowledgeList.appendChild(li);
        }
        currentKnowledge = body.knowledge_point;
        body.knowledge_points.forEach(point => {
          const li = document.createElement('li');
          li.textContent = point;
          li.classList.add('knowledge-item');
          if (point === currentKnowledge) li.classList.add('active');
          li.addEventListener('click', () => {
            if (point === currentKnowledge) return;
            const previous = knowledgeList.querySelector('.active');
            if (previous) previous.classList.remove('active');
            li.classList.add('active');
            currentKnowledge = point;
            loadCards(currentLevel, point);
          });
          knowledgeList.appendChild(li);
        });
        const container = document.getElementById(config.containerId);
        typesetPending(replaceWithMarkup(container, body.container_html));
      }

      document.querySelectorAll('.level-btn').forEach(button => {
        button.addEventListener('click', () => {
          if (button.dataset.level === currentLevel) return;
          document.querySelectorAll('.level-btn.active').forEach(b => b.classList.remove('active'));
          button.classList.add('active');
          currentLevel = button.dataset.level;
          loadLevel(currentLevel);
        });
      });

      loadLevel(currentLevel);
"""


@dataclass(slots=True)
class PageRenderer:
    """Builds the study page and standalone card documents."""

    title: str = APP_NAME

    def wrap_document(self, body_html: str, extra_script: str = "") -> str:
        """Wrap ``body_html`` in a document loading MathJax and highlight.js."""
        config = json.dumps(
            {
                "containerId": RESULTS_CONTAINER_ID,
                "defaultLevel": DEFAULT_LEVEL,
                "emptyKnowledgeItem": EMPTY_KNOWLEDGE_LIST_ITEM,
                "loadFailedMessage": LOAD_FAILED_MESSAGE,
            },
            ensure_ascii=False,
        )
        return f"""<!doctype html>
<html lang=\"zh-CN\">
  <head>
    <meta charset=\"utf-8\" />
    <title>{html.escape(self.title)}</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <link rel=\"stylesheet\" href=\"{_HIGHLIGHT_STYLE}\" />
    <style>{Styles.get_card_css()}    </style>
    <script>
      window.SELFQUIZ = {config};
      window.MathJax = {{ tex: {{ inlineMath: [['$','$'], ['\\\\(','\\\\)']], displayMath: [['$$','$$']] }}, startup: {{ typeset: false }} }};
    </script>
    <script src=\"{_HIGHLIGHT_SCRIPT}\"></script>
    <script defer src=\"{_MATHJAX_SCRIPT}\"></script>
  </head>
  <body>
{body_html}
    <script>{_CARD_SCRIPT}{extra_script}    </script>
  </body>
</html>"""

    def render_study_page(self) -> str:
        """Full page with level buttons, knowledge list and the results panel."""
        buttons = "\n".join(
            f'      <button class="level-btn{" active" if level == DEFAULT_LEVEL else ""}" '
            f'data-level="{html.escape(level)}">{html.escape(label)}</button>'
            for level, label in LEVELS
        )
        body = f"""    <div class=\"level-bar\">
{buttons}
    </div>
    <div class=\"layout\">
      <ul id=\"knowledge-list\"></ul>
      <div id=\"{RESULTS_CONTAINER_ID}\"></div>
    </div>"""
        return self.wrap_document(body, extra_script=_NAVIGATION_SCRIPT)

    def render_card_document(self, container_html: str) -> str:
        """Standalone document around an already rendered results container."""
        return self.wrap_document(container_html)


# Shared instance; rendering only reads immutable configuration.
renderer = PageRenderer()
