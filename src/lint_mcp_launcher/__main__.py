"""lint-mcp 启动器入口点。

支持: python -m lint_mcp_launcher
"""

from .app import main

if __name__ == "__main__":
    main()
