"""Error taxonomy. Each error carries the Arabic message shown to the operator."""

INVALID_CREDENTIALS = "بيانات الاعتماد غير صحيحة"
LOGIN_FAILED = "حدث خطأ أثناء تسجيل الدخول"
LOGIN_OK = "تم تسجيل الدخول بنجاح"
NO_MATCHES = "لا يوجد نتائج مطابقة لمعايير البحث"
NO_SCHOOLS = "لم يتم العثور على مدارس مسجلة"


class DashboardError(Exception):
    message = "حدث خطأ غير متوقع"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.message)
        self.detail = detail


class UnauthenticatedError(DashboardError):
    message = "يرجى تسجيل الدخول أولاً"


class LoadError(DashboardError):
    message = "حدث خطأ أثناء تحميل المدارس"


class EmptyCriteriaError(DashboardError):
    message = "يرجى إدخال معيار بحث واحد على الأقل"


class ExportError(DashboardError):
    message = "لا توجد بيانات للتصدير"


class ExportWriteError(DashboardError):
    message = "تعذر حفظ ملف التصدير"
