"""应用级异常。路由层捕获后转换为重定向 + 提示，不向用户暴露内部细节。"""


class LoginRequiredError(Exception):
    """未登录或角色不符，由 app.main 中的异常处理器重定向到 /login。"""

    def __init__(self, required_role: str | None = None):
        self.required_role = required_role
        super().__init__(f"login required (role={required_role or 'any'})")


class AssessmentSubmissionError(Exception):
    """创建测评的整体失败：本次请求按失败处理，回到创建表单。"""


class InvalidAssessmentTypeError(AssessmentSubmissionError, ValueError):
    """assessment_type 不在 quiz / test / q_assignment 之内，未写入任何数据。"""

    def __init__(self, type_tag: object):
        self.type_tag = type_tag
        super().__init__(f"Invalid assessment type: {type_tag!r}")


class AssessmentPersistenceError(AssessmentSubmissionError):
    """写入测评主表或题目表失败。已提交的行保留，不做补偿回滚。"""
