"""Block Kit definition of the create-project modal.

Block and action IDs here are the keys Slack uses in ``view.state.values``
when the modal is submitted, so the interaction dispatcher reads them back.
"""

CREATE_PROJECT_COMMAND = "/create-project"
CREATE_PROJECT_CALLBACK_ID = "create_project_modal"

NAME_BLOCK_ID = "name_block"
NAME_ACTION_ID = "name"
DESCRIPTION_BLOCK_ID = "desc_block"
DESCRIPTION_ACTION_ID = "description"


def _plain_text(text: str) -> dict:
    return {"type": "plain_text", "text": text}


def build_create_project_modal() -> dict:
    """Return the ``view`` payload for ``views.open``.

    Two inputs: a required single-line project name and an optional
    multi-line description.
    """
    return {
        "type": "modal",
        "callback_id": CREATE_PROJECT_CALLBACK_ID,
        "title": _plain_text("Create project"),
        "submit": _plain_text("Create"),
        "close": _plain_text("Cancel"),
        "blocks": [
            {
                "type": "input",
                "block_id": NAME_BLOCK_ID,
                "label": _plain_text("Project name"),
                "element": {
                    "type": "plain_text_input",
                    "action_id": NAME_ACTION_ID,
                    "placeholder": _plain_text("e.g., Huracán Stats MVP"),
                },
            },
            {
                "type": "input",
                "block_id": DESCRIPTION_BLOCK_ID,
                "optional": True,
                "label": _plain_text("Description"),
                "element": {
                    "type": "plain_text_input",
                    "action_id": DESCRIPTION_ACTION_ID,
                    "multiline": True,
                    "placeholder": _plain_text("What is this project about?"),
                },
            },
        ],
    }
