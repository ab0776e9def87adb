import markdown
import yaml

import logging
import os
import shutil

logger=logging.getLogger(__name__)

MARKDOWN_EXTENSIONS=["fenced_code", "tables", "sane_lists", "pymdownx.tilde"]

def render_markdown(text):
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)

class DocumentStore:
    """Flat directory of documents, one file per document.

    Names are joined onto the root as given; new names go through
    validate_document_name first.
    """

    def __init__(self, root):
        self.root=root
        os.makedirs(self.root, exist_ok=True)

    def path(self, name):
        return os.path.join(self.root, name)

    def names(self):
        return sorted(entry for entry in os.listdir(self.root)
                      if os.path.isfile(self.path(entry)))

    def exists(self, name):
        return os.path.isfile(self.path(name))

    def read(self, name):
        # Undecodable bytes become U+FFFD so any file can be rendered or edited
        with open(self.path(name), encoding="utf-8", errors="replace") as f:
            return f.read()

    def read_bytes(self, name):
        with open(self.path(name), "rb") as f:
            return f.read()

    def write(self, name, content):
        with open(self.path(name), "w", encoding="utf-8", newline="") as f:
            f.write(content)
        logger.info("Wrote %s", name)

    def create(self, name):
        self.write(name, "")

    def delete(self, name):
        os.remove(self.path(name))
        logger.info("Deleted %s", name)

    def copy(self, source, target):
        shutil.copyfile(self.path(source), self.path(target))
        logger.info("Copied %s to %s", source, target)

    def render(self, name):
        """Return (kind, body) for viewing a document.

        kind is "markdown" with rendered HTML as body for .md files,
        otherwise "text" with the raw file bytes.
        """
        if os.path.splitext(name)[1]==".md":
            return "markdown", render_markdown(self.read(name))
        return "text", self.read_bytes(name)

class UserStore:
    """YAML mapping of username to password hash. Entries are only ever appended."""

    def __init__(self, path):
        self.path=path

    def load(self):
        if not os.path.exists(self.path):
            return dict()
        with open(self.path, encoding="utf-8") as f:
            users=yaml.safe_load(f)
        return users or dict()

    def __contains__(self, username):
        return username in self.load()

    def add(self, username, password_hash):
        entry=yaml.safe_dump({username: password_hash}, default_flow_style=False)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(entry)
        logger.info("Added user %s", username)
