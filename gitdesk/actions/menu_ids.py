"""Menu command ids referenced by the blankslate."""

PUSH = "push"
PULL = "pull"
CREATE_PULL_REQUEST = "create-pull-request"
TOGGLE_STASHED_CHANGES = "toggle-stashed-changes"
OPEN_WORKING_DIRECTORY = "open-working-directory"
CREATE_NEW_FILE = "create-new-file"
VIEW_REPOSITORY_ON_GITHUB = "view-repository-on-github"
