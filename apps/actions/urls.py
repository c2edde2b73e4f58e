from django.urls import path
from . import views

app_name = 'actions'

urlpatterns = [
    # POST /action-entries                   - Log an action
    # GET  /piggybanks/{id}/action-entries   - Entries grouped per template
    # GET  /piggybanks/{id}/stats            - Totals of a goal
    path('action-entries', views.create_entry, name='entry-create'),
    path('piggybanks/<uuid:piggybank_id>/action-entries', views.piggybank_entries, name='piggybank-entries'),
    path('piggybanks/<uuid:piggybank_id>/stats', views.piggybank_stats, name='piggybank-stats'),
]
