"""
String tables for LocalizationService.

Keys follow the dotted naming of the web client ('practice.notes', ...).
"""

EN = {
    # Common
    'common.cancel': "Cancel",
    'common.edit': "Edit",
    'common.save': "Save",
    'common.close': "Close",
    'common.previous': "Previous",
    'common.next': "Next",
    'common.loading': "Loading...",

    # Error list page
    'practice.backToPractice': "Back to practice",
    'practice.errorAnalysis': "Error analysis",
    'errorLogs.question': "questions",
    'errorLogs.empty': "No questions to review",
    'errorLogs.loadError': "Could not load your error log",
    'practice.tabs.all': "All",
    'practice.tabs.readingWriting': "Reading & Writing",
    'practice.tabs.math': "Math",
    'practice.perPage': "Per page",
    'practice.pageOf': "Page {page} of {pages}",

    # Practice launchers
    'practice.practiceByType': "Practice by type",
    'practice.practiceAll': "Practice all",
    'practice.selectPracticeType': "Choose a practice type",
    'practice.selectPracticeTypeDescription': "Pick the question type you want to focus on to work on your weak points.",
    'practice.practiceType': "Practice type",
    'practice.startPractice': "Start practice",
    'practice.practiceTypes.algebra': "Algebra",
    'practice.practiceTypes.geometry': "Geometry",
    'practice.practiceTypes.reading': "Reading",
    'practice.practiceTypes.writing': "Writing",
    'practice.practiceTypes.vocabulary': "Vocabulary",
    'practice.practiceTypes.grammar': "Grammar",

    # Review dialog
    'practice.reviewQuestion': "Review question",
    'scoreDetails.question': "Question",
    'scoreDetails.answerOptions': "Answer options",
    'scoreDetails.yourAnswer': "Your answer",
    'scoreDetails.readingWriting': "Reading and Writing",
    'scoreDetails.math': "Math",
    'errorLogs.needsReview': "Needs review",
    'practice.reviewed': "Reviewed",
    'practice.notes': "Notes",
    'practice.enterNotes': "Write down what you learned from this question...",
    'practice.noNotesYet': "No notes yet",
    'errorLogs.noteRequired': "Please enter your notes before saving",
    'errorLogs.noteUpdatedSuccess': "Note updated",
    'errorLogs.noteUpdateError': "Could not update the note",
    'errorLogs.statusUpdatedSuccess': "Status updated",
    'errorLogs.statusUpdateError': "Could not update the status",
}

VI = {
    'common.cancel': "Hủy",
    'common.edit': "Chỉnh sửa",
    'common.save': "Lưu",
    'common.close': "Đóng",
    'common.previous': "Trước",
    'common.next': "Sau",
    'common.loading': "Đang tải...",

    'practice.backToPractice': "Quay lại luyện tập",
    'practice.errorAnalysis': "Phân tích lỗi sai",
    'errorLogs.question': "câu hỏi",
    'errorLogs.empty': "Không có câu hỏi nào cần xem lại",
    'errorLogs.loadError': "Không thể tải danh sách lỗi sai",
    'practice.tabs.all': "Tất cả",
    'practice.tabs.readingWriting': "Đọc & Viết",
    'practice.tabs.math': "Toán",
    'practice.perPage': "Mỗi trang",
    'practice.pageOf': "Trang {page}/{pages}",

    'practice.practiceByType': "Luyện tập theo dạng bài",
    'practice.practiceAll': "Luyện tập tất cả",
    'practice.selectPracticeType': "Chọn dạng bài luyện tập",
    'practice.selectPracticeTypeDescription': "Chọn dạng bài bạn muốn luyện tập để tập trung vào những điểm yếu cần cải thiện.",
    'practice.practiceType': "Dạng bài",
    'practice.startPractice': "Bắt đầu luyện tập",
    'practice.practiceTypes.algebra': "Đại số",
    'practice.practiceTypes.geometry': "Hình học",
    'practice.practiceTypes.reading': "Đọc hiểu",
    'practice.practiceTypes.writing': "Viết",
    'practice.practiceTypes.vocabulary': "Từ vựng",
    'practice.practiceTypes.grammar': "Ngữ pháp",

    'practice.reviewQuestion': "Xem lại câu hỏi",
    'scoreDetails.question': "Câu hỏi",
    'scoreDetails.answerOptions': "Các lựa chọn",
    'scoreDetails.yourAnswer': "Bạn đã chọn",
    'scoreDetails.readingWriting': "Đọc và Viết",
    'scoreDetails.math': "Toán",
    'errorLogs.needsReview': "Cần xem lại",
    'practice.reviewed': "Đã xem lại",
    'practice.notes': "Ghi chú",
    'practice.enterNotes': "Ghi lại điều bạn rút ra từ câu hỏi này...",
    'practice.noNotesYet': "Chưa có ghi chú",
    'errorLogs.noteRequired': "Vui lòng nhập ghi chú trước khi lưu",
    'errorLogs.noteUpdatedSuccess': "Đã cập nhật ghi chú",
    'errorLogs.noteUpdateError': "Không thể cập nhật ghi chú",
    'errorLogs.statusUpdatedSuccess': "Đã cập nhật trạng thái",
    'errorLogs.statusUpdateError': "Không thể cập nhật trạng thái",
}

TRANSLATIONS = {
    'en': EN,
    'vi': VI,
}

__all__ = ['TRANSLATIONS']
