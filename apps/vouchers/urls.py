from django.urls import path
from . import views

app_name = 'vouchers'

urlpatterns = [
    # POST /voucher-templates                    - Create template
    # GET  /piggybanks/{id}/voucher-templates    - List templates of a goal
    path('voucher-templates', views.create_template, name='template-create'),
    path('piggybanks/<uuid:piggybank_id>/voucher-templates', views.piggybank_templates, name='piggybank-templates'),
]
