from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'piggybanks'

# Router for ViewSets
router = SimpleRouter(trailing_slash=False)
router.register(r'piggybanks', views.PiggyBankViewSet, basename='piggybank')

urlpatterns = [
    # PiggyBank ViewSet routes
    # GET    /piggybanks             - List open goals with totals
    # POST   /piggybanks             - Create goal
    # GET    /piggybanks/{id}        - Get goal
    # POST   /piggybanks/{id}/close  - Close goal
    path('', include(router.urls)),
]
