from django.urls import path
from . import views

app_name = 'dashboard'

urlpatterns = [
    path('statistics', views.statistics, name='statistics'),
    path('bar-chart', views.bar_chart, name='bar_chart'),
    path('combined-data', views.combined, name='combined_data'),
]
