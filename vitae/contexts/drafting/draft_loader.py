"""
Draft replay from YAML.

Developer tooling: a YAML file describing a draft is replayed through
ResumeEditor operations, exactly as the wizard would build it. Nothing is
written back; the session stays the only owner of the draft.

Expected layout:

    resume:
      contacts: {first_name: Ada, last_name: Lovelace, email: ..., ...}
      summary: "..."
      experience: [{job_title: ..., company: ..., ...}]
      education: [...]
      certificates: [...]
      skills: [{name: Python, level: Expert, category: Programming Languages}]
      projects: [...]
"""

from pathlib import Path
from typing import Any, Dict

from omegaconf import OmegaConf

from vitae.contexts.drafting.logger import log_draft_loaded
from vitae.contexts.drafting.mutations import ResumeEditor
from vitae.contexts.drafting.resume_data_structure import COLLECTION_TYPES


def replay_draft(draft: Dict[str, Any], editor: ResumeEditor) -> Dict[str, int]:
    """
    Apply a draft mapping to an editor.

    Args:
        draft: Mapping with optional contacts, summary and collection keys
        editor: Target editor (entries are appended after existing ones)

    Returns:
        Number of entries added per collection

    Raises:
        ValueError: If the mapping has unknown keys or fields
    """
    known_keys = {"contacts", "summary", *COLLECTION_TYPES}
    unknown = sorted(set(draft) - known_keys)
    if unknown:
        raise ValueError(f"Unknown draft keys: {unknown}")

    if draft.get("contacts"):
        editor.update_contacts(**{k: v if v is not None else "" for k, v in draft["contacts"].items()})
    if draft.get("summary"):
        editor.set_summary(draft["summary"])

    counts = {}
    for collection in COLLECTION_TYPES:
        entries = draft.get(collection) or []
        for entry in entries:
            editor.add(collection, **entry)
        counts[collection] = len(entries)

    return counts


def load_draft(yaml_path: Path, editor: ResumeEditor = None) -> ResumeEditor:
    """
    Load a YAML draft file into an editor.

    Args:
        yaml_path: Path to draft YAML (must contain a top-level 'resume' key)
        editor: Existing editor to extend (default: a fresh one)

    Returns:
        The editor holding the replayed draft

    Raises:
        FileNotFoundError: If yaml_path does not exist
        ValueError: If the YAML structure is invalid
    """
    yaml_path = Path(yaml_path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"Draft file not found: {yaml_path}")

    yaml_dict = OmegaConf.to_container(OmegaConf.load(yaml_path), resolve=True)
    if not isinstance(yaml_dict, dict) or "resume" not in yaml_dict:
        raise ValueError(f"Invalid draft structure: missing 'resume' key in {yaml_path}")

    editor = editor or ResumeEditor()
    counts = replay_draft(yaml_dict["resume"] or {}, editor)
    log_draft_loaded(yaml_path, counts)
    return editor
