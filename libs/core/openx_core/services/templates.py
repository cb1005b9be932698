"""Starter configuration written on first run."""

from types import MappingProxyType

_HEADER = """# openx configuration for {os_label}
# Edit this file to customize your development environment

apps:
"""

_EDITORS = """  # Code Editors & IDEs
  vscode:
    darwin: "/Applications/Visual Studio Code.app"
    linux: "code"
    windows: "Code.exe"

  goland:
    darwin: "/Applications/GoLand.app"
    linux: "goland"
    windows: "goland64.exe"

  intellij:
    darwin: "/Applications/IntelliJ IDEA.app"
    linux: "idea"
    windows: "idea64.exe"

  webstorm:
    darwin: "/Applications/WebStorm.app"
    linux: "webstorm"
    windows: "webstorm64.exe"

  sublime:
    darwin: "/Applications/Sublime Text.app"
    linux: "subl"
    windows: "subl.exe"

"""

_NOTEPAD = """  notepad:
    windows: "notepad.exe"

"""

_BROWSERS = """  # Browsers
  chrome:
    darwin: "/Applications/Google Chrome.app"
    linux: "google-chrome"
    windows: "chrome.exe"

  firefox:
    darwin: "/Applications/Firefox.app"
    linux: "firefox"
    windows: "firefox.exe"

"""

_SAFARI = """  safari:
    darwin: "/Applications/Safari.app"

"""

_EDGE = """  edge:
    darwin: "/Applications/Microsoft Edge.app"
    linux: "microsoft-edge"
    windows: "msedge.exe"

"""

_TOOLS = """  # Developer Tools
  postman:
    darwin: "/Applications/Postman.app"
    linux: "postman"
    windows: "Postman.exe"

  figma:
    darwin: "/Applications/Figma.app"
    linux: "figma-linux"
    windows: "Figma.exe"

"""

_COMMUNICATION = """  # Communication
  slack:
    darwin: "/Applications/Slack.app"
    linux: "slack"
    windows: "slack.exe"

  discord:
    darwin: "/Applications/Discord.app"
    linux: "discord"
    windows: "Discord.exe"

"""

_OFFICE = """  # Office
  word:
    darwin: "/Applications/Microsoft Word.app"
    linux: "libreoffice --writer"
    windows: "WINWORD.EXE"

  excel:
    darwin: "/Applications/Microsoft Excel.app"
    linux: "libreoffice --calc"
    windows: "EXCEL.EXE"

  powerpoint:
    darwin: "/Applications/Microsoft PowerPoint.app"
    linux: "libreoffice --impress"
    windows: "POWERPNT.EXE"

"""

_ALIASES = """aliases:
  code: vscode
  idea: intellij
  ij: intellij
  ws: webstorm
  st: sublime
  gc: chrome
  ff: firefox
  ppt: powerpoint
  pp: powerpoint
"""

_GENERIC = """# openx configuration
# Edit this file to customize your development environment

apps:
  # Add your applications here
  # Format:
  # app-name:
  #   darwin: "/Applications/App.app"     # macOS path
  #   linux: "app-command"                # Linux command
  #   windows: "app.exe"                  # Windows executable
  #   kill: ["Process Name"]              # optional, derived from the path otherwise

aliases:
  # Add your aliases here
  # Format:
  # alias: app-name
"""

STARTER_TEMPLATES = MappingProxyType({
    "darwin": (
        _HEADER.format(os_label="macOS") + _EDITORS + _BROWSERS + _SAFARI + _EDGE
        + _TOOLS + _COMMUNICATION + _OFFICE + _ALIASES
    ),
    "linux": (
        _HEADER.format(os_label="Linux") + _EDITORS + _BROWSERS + _EDGE
        + _TOOLS + _OFFICE + _ALIASES
    ),
    "windows": (
        _HEADER.format(os_label="Windows") + _EDITORS + _NOTEPAD + _BROWSERS + _EDGE
        + _TOOLS + _OFFICE + _ALIASES
    ),
})


def get_starter_template(platform_name: str) -> str:
    return STARTER_TEMPLATES.get(platform_name, _GENERIC)
