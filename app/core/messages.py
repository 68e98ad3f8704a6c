# /halaqat-backend/app/core/messages.py

# User-facing API messages (Arabic UI).

INVALID_DATA = "بيانات غير صالحة"
INVALID_CREDENTIALS = "اسم المستخدم أو كلمة المرور غير صحيحة"
NO_UPDATE_DATA = "لا توجد بيانات للتحديث"

TEACHER_NOT_FOUND = "المعلم غير موجود"
TEACHERS_FETCH_FAILED = "خطأ في جلب بيانات المعلمين"

PARENT_NOT_FOUND = "ولي الأمر غير موجود"
PARENTS_FETCH_FAILED = "خطأ في جلب بيانات أولياء الأمور"

STUDENT_NOT_FOUND = "الطالب غير موجود"
STUDENTS_FETCH_FAILED = "خطأ في جلب بيانات الطلاب"
STUDENT_CREATE_FAILED = "خطأ في إضافة الطالب"
STUDENT_UPDATE_FAILED = "خطأ في تحديث بيانات الطالب"
STUDENT_DELETE_FAILED = "خطأ في حذف الطالب"
STUDENT_DELETED = "تم حذف الطالب بنجاح"

RECORD_NOT_FOUND = "السجل غير موجود"
RECORDS_FETCH_FAILED = "خطأ في جلب السجلات"
STUDENT_RECORDS_FETCH_FAILED = "خطأ في جلب سجلات الطالب"
RECORD_CREATE_FAILED = "خطأ في إضافة السجل اليومي"
RECORD_UPDATE_FAILED = "خطأ في تحديث السجل"
RECORD_DELETE_FAILED = "خطأ في حذف السجل"
RECORD_DELETED = "تم حذف السجل بنجاح"

QURAN_ERROR_NOT_FOUND = "الخطأ غير موجود"
QURAN_ERRORS_FETCH_FAILED = "خطأ في جلب أخطاء القرآن"
QURAN_ERROR_CREATE_FAILED = "خطأ في إضافة خطأ القرآن"
QURAN_ERROR_DELETE_FAILED = "خطأ في حذف الخطأ"
QURAN_ERROR_DELETED = "تم حذف الخطأ بنجاح"

REPORT_FAILED = "خطأ في إنشاء التقرير"
