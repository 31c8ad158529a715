"""Paths, CSS selectors and label markers that define AtCoder's page layout."""

ATCODER_ENDPOINT = "https://atcoder.jp"

HOME_PATH = "/"
LOGIN_PATH = "/login"
CONTEST_PATH = "/contests/{contest_id}"
CONTEST_TASKS_PATH = "/contests/{contest_id}/tasks"
CONTEST_SUBMIT_PATH = "/contests/{contest_id}/submit"

USER_PROFILE_PREFIX = "/users/"
USER_PROFILE_LINK = f'li a[href^="{USER_PROFILE_PREFIX}"]'

CSRF_TOKEN_FIELD = "csrf_token"
CSRF_TOKEN_INPUT = f'input[name="{CSRF_TOKEN_FIELD}"]'

LOGIN_ERROR_BANNER = "div.alert-danger"
LOGIN_SUCCESS_BANNER = "div.alert-success"

TASK_TABLE_ROWS = "table tbody tr"
TASK_ROW_CELLS = 4

SCORE_TABLES = "#contest-statement > .lang > .lang-ja table"
SCORE_TABLE_HEADER_CELLS = "thead > tr > th"
SCORE_TABLE_ROWS = "tbody > tr"
SCORE_TABLE_HEADERS = (["Task", "Score"], ["問題", "点数"])
SCORE_ROW_CELLS = 2

SAMPLE_HEADING = "h3"
SAMPLE_BODY = "pre"

TASK_SELECT_OPTIONS = 'select[name="data.TaskScreenName"] option'
LANGUAGE_SELECT_OPTIONS = 'div[id="select-lang-{task_screen_name}"] select option'

LOGIN_FORM_USERNAME = "username"
LOGIN_FORM_PASSWORD = "password"
SUBMIT_FORM_TASK = "data.TaskScreenName"
SUBMIT_FORM_LANGUAGE = "data.LanguageId"
SUBMIT_FORM_SOURCE = "sourceCode"
